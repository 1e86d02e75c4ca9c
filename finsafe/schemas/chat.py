from pydantic import BaseModel, Field
from typing import List, Literal, Optional

class ChatIn(BaseModel):
    # Missing and blank messages are rejected by the handlers with 400
    message: Optional[str] = None

    def text(self) -> str:
        return (self.message or "").strip()

class ChatOut(BaseModel):
    reply: str
    mode: Literal["ai", "enhanced_mock", "fallback", "error"]
    model: Optional[str] = None
    tokens: Optional[int] = None
    note: Optional[str] = None
    error: Optional[str] = None

class MinimalChatOut(BaseModel):
    reply: str
    timestamp: str

class ScamCheckOut(BaseModel):
    verdict: str
    verdictText: str
    badgeClass: Literal["safe", "warning", "danger"]
    explanation: str
    # never empty: default tips substitute when the model gives none
    safetyTips: List[str] = Field(default_factory=list)

class ScamAlertOut(BaseModel):
    reply: str
    verdict: str
    verdictText: str
    badgeClass: Literal["safe", "warning", "danger"]

class HealthOut(BaseModel):
    status: str
    server: str
    timestamp: str
    environment: Optional[str] = None
    openai: Literal["configured", "mock_mode"]
    vercel: bool = True
