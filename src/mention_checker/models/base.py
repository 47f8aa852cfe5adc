from abc import ABC, abstractmethod

class BaseLLMClient(ABC):
    name: str
    model: str

    @abstractmethod
    async def answer_async(self, prompt: str, temperature: float = 0.0) -> str:
        pass
