# This file marks the services package for API business logic modules.
# Service modules hold the customer rules and stay independent of HTTP transport concerns.
