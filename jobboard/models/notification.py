"""
Notification model
"""
from pydantic import BaseModel


class Notification(BaseModel):
    id: str
    userId: str
    message: str
    read: bool = False
    createdAt: str

    def __repr__(self):
        return f"<Notification to {self.userId}>"
