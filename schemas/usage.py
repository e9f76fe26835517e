from datetime import datetime

from schemas.base import CamelOut


class ApiUsageOut(CamelOut):
    endpoint: str
    date: datetime
    count: int
