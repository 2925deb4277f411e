from .naming_lookup import NamingLookup as NamingLookup
