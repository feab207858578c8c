
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from wikilens.api.dependencies import get_chat_client, get_translator
from wikilens.services.chat_client import ChatClient
from wikilens.services.translate_client import Translator
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

@router.get("/chat/{text}")
async def chat_endpoint(text: str, chat: ChatClient = Depends(get_chat_client)):
    try:
        return await chat.complete(text)
    except Exception as e:
        logger.error(f"Chat error: {e}")
        return JSONResponse({"error": "An error occurred"}, status_code=500)

@router.get("/translate/{lang}/{text}")
async def translate_endpoint(lang: str, text: str, translator: Translator = Depends(get_translator)):
    try:
        return await translator.translate(text, lang)
    except Exception as e:
        logger.error(f"Translation error: {e}")
        return JSONResponse({"error": "Translation failed"}, status_code=500)
