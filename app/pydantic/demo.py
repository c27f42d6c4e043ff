from pydantic import BaseModel


class Demo(BaseModel):
    title: str
    description: str  # HTML content
    path: str
    yearMonth: str
