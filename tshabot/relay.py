"""
Chat relay
Validates a question, forwards it to the completion provider with the TshaBot
persona, and shapes the answer (or the failure) into a JSON response.

One provider round-trip per call, no retries.
"""

from fastapi import Request, Response
from loguru import logger
from pydantic import ValidationError

from tshabot.exceptions import (
    ApiError,
    BadRequest,
    InternalProviderError,
    MethodNotAllowed,
    error_body,
    error_status,
)
from tshabot.models import MODEL, SYSTEM_PROMPT, ChatCompletionRequest, ChatMessage, ChatRequest, ChatResponse
from tshabot.provider import CompletionProvider
from tshabot.responses import write_json

# TODO: wildcard origin is pointless while the gate cookie is SameSite=Strict; pick one policy
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
}


class ChatRelay:
    def __init__(self, provider: CompletionProvider, model: str = MODEL, system_prompt: str = SYSTEM_PROMPT):
        self.provider = provider
        self.model = model
        self.system_prompt = system_prompt

    async def handle(self, request: Request) -> Response:
        try:
            payload = await self._answer(request)
            status_code = 200
        except ApiError as e:
            status_code, payload = error_status(e), error_body(e)
        return write_json(status_code, payload, headers=CORS_HEADERS)

    async def _answer(self, request: Request) -> dict:
        if request.method != "POST":
            logger.bind(method=request.method).warning(f"invalid request method: {request.method}")
            raise MethodNotAllowed()

        body = await request.body()
        try:
            chat_request = ChatRequest.model_validate_json(body)
        except ValidationError as e:
            logger.bind(error=str(e)).error("invalid request payload")
            raise BadRequest()

        if chat_request.question == "":
            raise BadRequest("The question field is required")

        completion_request = self.build_request(chat_request.question)
        try:
            completion = await self.provider.create_chat_completion(completion_request)
        except Exception as e:
            logger.bind(error=str(e)).error("error calling OpenAI API")
            raise InternalProviderError()

        if not completion.choices:
            raise InternalProviderError("No response from OpenAI")

        answer = completion.choices[0].message.content or ""
        return ChatResponse(answer=answer).model_dump()

    def build_request(self, question: str) -> ChatCompletionRequest:
        return ChatCompletionRequest(
            model=self.model,
            messages=[
                ChatMessage(role="system", content=self.system_prompt),
                ChatMessage(role="user", content=question),
            ],
        )
