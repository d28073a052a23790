from typing import Any, Dict, Optional

from config import load_config
from models.card import Card
from utils.clock import Clock, system_clock

def new_card(
    question: str,
    answer: str,
    config: Optional[Dict[str, Any]] = None,
    clock: Optional[Clock] = None,
) -> Card:
    """Create a card that is due now, seeded with the configured initial E-Factor."""
    if config is None:
        config = load_config()
    initial_factor = config.get("scheduler", {}).get("initial_factor", 2.0)
    return Card(
        question=question,
        answer=answer,
        ease_factor=initial_factor,
        clock=clock or system_clock,
    )
