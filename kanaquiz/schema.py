from pydantic import BaseModel, Field
from typing import List

class WordResponse(BaseModel):
    family: str  # hiragana, katakana or both
    word: List[str]  # one kana per element
    text: str  # the word joined for display

class CheckRequest(BaseModel):
    word: List[str] = Field(max_length=16)
    answer: str = Field(max_length=64)

class CheckResult(BaseModel):
    correct: bool
    expected: str  # romaji of the submitted word

class ErrorResponse(BaseModel):
    message: str
