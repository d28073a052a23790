import logging

from utils.cards import new_card
from utils.clock import fixed_clock
from utils.logs import configure_logging
from utils.sm2 import SM2


def test_new_card_uses_configured_initial_factor():
    card = new_card(
        "Boiling point of water?",
        "100 C",
        config={"scheduler": {"initial_factor": 2.5}},
        clock=fixed_clock(500),
    )
    assert card.ease_factor == 2.5
    assert card.repeat_count == 0
    assert card.next_due == 500
    assert card.is_due()


def test_new_card_falls_back_to_default_factor():
    card = new_card("q", "a", config={"logging": {"level": "INFO"}}, clock=fixed_clock(0))
    assert card.ease_factor == 2.0


def test_configure_logging_sets_package_levels():
    configure_logging({"logging": {"level": "DEBUG"}})
    assert logging.getLogger("models").level == logging.DEBUG
    assert logging.getLogger("utils").level == logging.DEBUG

    configure_logging({"logging": {"level": "WARNING"}})
    assert logging.getLogger("models").level == logging.WARNING
    assert len(logging.getLogger("models").handlers) == 1


def test_review_logs_schedule_at_debug(caplog):
    card = new_card("q", "a", config={"scheduler": {"initial_factor": 2.0}}, clock=fixed_clock(0))
    with caplog.at_level(logging.DEBUG, logger="models.card"):
        card.repeat(SM2(), 5)
    assert any("scheduled" in record.getMessage() for record in caplog.records)


def test_empty_config_is_used_as_given(monkeypatch):
    import utils.cards
    import utils.logs

    def _fail():
        raise AssertionError("config file should not be read")

    monkeypatch.setattr(utils.cards, "load_config", _fail)
    monkeypatch.setattr(utils.logs, "load_config", _fail)

    card = new_card("q", "a", config={}, clock=fixed_clock(0))
    configure_logging({})
    assert card.ease_factor == 2.0
    assert logging.getLogger("models").level == logging.INFO
