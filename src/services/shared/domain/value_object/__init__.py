from .iso_date_time import IsoDateTime as IsoDateTime
