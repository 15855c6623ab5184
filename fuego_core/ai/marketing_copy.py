# =============================================================================
# fuego_core/ai/marketing_copy.py
# Instagram captions for menu dishes
# =============================================================================
"""
Marketing copy generator used by the dashboard's marketing tab.

Failures never propagate: the caller always gets a string, either the
caption or a fixed user-facing message.
"""

from __future__ import annotations
from typing import Optional

from fuego_core.logging import get_logger

logger = get_logger(__name__)

TONES = ("formal", "divertido", "urgente")
DEFAULT_MODEL = "gpt-4o-mini"

MARKETING_ERROR_MESSAGE = "Erro ao conectar com a IA. Tente novamente."
MARKETING_EMPTY_MESSAGE = "Não foi possível gerar o texto no momento."

SYSTEM_PROMPT = (
    "Você é um especialista em Marketing Gastronômico para o restaurante 'Fuego Prime'."
)


def build_marketing_prompt(dish_name: str, dish_description: str, tone: str) -> str:
    return (
        "Crie uma legenda curta, atraente e com emojis para o Instagram.\n\n"
        f"Prato: {dish_name}\n"
        f"Descrição: {dish_description}\n"
        f"Tom de voz: {tone}\n\n"
        "A legenda deve ter chamadas para ação (CTA) para reservar mesa. "
        "Não use hashtags em excesso."
    )


def generate_marketing_copy(
    dish_name: str,
    dish_description: str,
    tone: str,
    api_key: Optional[str] = None,
    client=None,
    model: str = DEFAULT_MODEL,
) -> str:
    """
    Generate an Instagram caption for a dish.

    Args:
        dish_name: Dish name
        dish_description: Dish description
        tone: formal | divertido | urgente
        api_key: OpenAI key (defaults to settings)
        client: Preconfigured OpenAI client

    Returns:
        Caption text, or a fixed message when generation fails
    """
    if tone not in TONES:
        logger.warning(f"Unknown marketing tone '{tone}', using 'divertido'")
        tone = "divertido"

    try:
        if client is None:
            import openai
            if api_key is None:
                from fuego_core.config import get_settings
                api_key = get_settings().openai_api_key
            if not api_key:
                logger.warning("Marketing copy requested but no OpenAI API key configured")
                return MARKETING_ERROR_MESSAGE
            client = openai.OpenAI(api_key=api_key)

        response = client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_marketing_prompt(dish_name, dish_description, tone)},
            ],
            max_tokens=300,
            temperature=0.8,
        )
        text = response.choices[0].message.content
    except Exception as e:
        logger.error(f"Marketing copy generation failed: {e}")
        return MARKETING_ERROR_MESSAGE

    return text.strip() if text and text.strip() else MARKETING_EMPTY_MESSAGE
