"""Features for hearth-access.

- permissions: role and channel-override permission resolution
- rate_limiting: fixed-window counters over a counting store
- quotas: instance quota configuration and typed quota errors
- access: the combined authorization flow
"""
