from pydantic import BaseModel, ConfigDict
from datetime import datetime

from famfin.models.enums import TransactionKind


class ActivityItemRead(BaseModel):
    id: str
    timestamp: datetime
    message: str
    kind: TransactionKind

    model_config = ConfigDict(from_attributes=True)
