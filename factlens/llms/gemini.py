"""
Gemini chat model factory using the official langchain-google-genai package.
"""

from typing import Optional

from langchain_google_genai import ChatGoogleGenerativeAI

from factlens.observability.logger import get_logger, PipelineStep

logger = get_logger(__name__, PipelineStep.SUMMARY)


def create_gemini_model(
    api_key: Optional[str],
    model: str = "gemini-2.5-flash",
    temperature: float = 0.0,
    timeout: Optional[float] = None,
    **kwargs
) -> Optional[ChatGoogleGenerativeAI]:
    """
    build a Gemini chat model, or None when no API key is configured.

    returning None instead of raising lets the summary step answer with its
    misconfiguration summary while the rest of the service keeps working.

    example:
        >>> llm = create_gemini_model(api_key=os.getenv("GEMINI_API_KEY"))
        >>> chain = prompt | llm | StrOutputParser()
    """
    if not api_key:
        logger.warning("GEMINI_API_KEY not set - summaries will report a configuration error")
        return None

    return ChatGoogleGenerativeAI(
        model=model,
        google_api_key=api_key,
        temperature=temperature,
        timeout=timeout,
        **kwargs
    )
