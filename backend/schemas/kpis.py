from pydantic import BaseModel


class KpiRead(BaseModel):
    date: str
    stock: int
    demand: int

    class Config:
        from_attributes = True
