from pydantic import BaseModel


class ResponseModel(BaseModel):
    status: bool
    status_code: int
    msg: str
