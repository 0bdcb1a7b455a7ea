# This file marks the services package used by API routers.
