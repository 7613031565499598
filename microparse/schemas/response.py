from typing import Dict, Any, Optional
from pydantic import BaseModel


class MicrodataRequest(BaseModel):
    url: Optional[str] = None
    html: Optional[str] = None
    base_url: Optional[str] = None


class MicrodataResponse(BaseModel):
    base_url: str
    microdata: Dict[str, Any]
