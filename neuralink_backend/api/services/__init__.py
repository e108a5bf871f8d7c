# This file marks the services package for the in-memory stores behind the API.
# It exists so routers depend on cohesive store classes instead of raw seed literals.
# Store modules isolate lookup and append rules from transport concerns.
