from .card import Card
from .record import CardRecord, RECORD_KEYS

__all__ = ['Card', 'CardRecord', 'RECORD_KEYS']
