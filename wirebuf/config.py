class Config:
    TRACE: bool = False
