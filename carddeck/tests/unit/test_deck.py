"""
Deck类的单元测试.

覆盖构造、发牌、发完后的异常以及可注入随机数生成器.
"""

import logging
import random
from collections import defaultdict

import pytest

from carddeck.core.deck import (
    DECK_EXHAUSTED_MESSAGE,
    Card,
    Deck,
    DeckExhaustedError,
    InvalidOperationError,
    Rank,
    Suit,
)
from carddeck.tests.anti_cheat.core_usage_checker import CoreUsageChecker

AMOUNT_ALL_CARDS = 52


class TestDeckConstruction:
    """牌组构造的测试."""

    def test_new_deck_has_all_cards(self, deck):
        CoreUsageChecker.verify_real_objects(deck, "Deck")

        assert deck.size() == AMOUNT_ALL_CARDS
        assert len(deck) == AMOUNT_ALL_CARDS
        assert not deck.is_empty

    def test_default_rng(self):
        deck = Deck()

        assert deck.size() == AMOUNT_ALL_CARDS

    def test_same_seed_same_order(self):
        first = Deck(random.Random(7))
        second = Deck(random.Random(7))

        assert first.deal_cards(AMOUNT_ALL_CARDS) == second.deal_cards(AMOUNT_ALL_CARDS)

    def test_deck_is_shuffled(self, seeded_rng):
        """同一生成器连续创建的两副牌顺序不同."""
        first = Deck(seeded_rng).deal_cards(AMOUNT_ALL_CARDS)
        second = Deck(seeded_rng).deal_cards(AMOUNT_ALL_CARDS)

        assert first != second

    def test_decks_are_independent(self, seeded_rng):
        first = Deck(seeded_rng)
        second = Deck(seeded_rng)

        first.deal_cards(10)

        assert first.size() == 42
        assert second.size() == AMOUNT_ALL_CARDS


class TestDeal:
    """发牌的测试."""

    def test_deal_one_card(self, deck):
        card = deck.deal()

        CoreUsageChecker.verify_real_objects(card, "Card")
        assert deck.size() == 51

    def test_size_decreases_by_one_per_deal(self, deck):
        for dealt in range(1, AMOUNT_ALL_CARDS + 1):
            deck.deal()
            assert deck.size() == AMOUNT_ALL_CARDS - dealt

        assert deck.is_empty

    def test_full_deal_covers_every_card(self, deck):
        cards = []
        while deck.size() > 0:
            cards.append(deck.deal())

        cards_per_suit = defaultdict(list)
        for card in cards:
            cards_per_suit[card.suit].append(card)

        for suit in Suit:
            suited_cards = cards_per_suit[suit]
            assert len(suited_cards) == AMOUNT_ALL_CARDS // 4
            for rank in Rank:
                assert Card(rank, suit) in suited_cards, f"Card not found: {Card(rank, suit)}"

    def test_no_card_repeats(self, deck, reference_cards):
        cards = [deck.deal() for _ in range(AMOUNT_ALL_CARDS)]

        assert len(set(cards)) == AMOUNT_ALL_CARDS
        assert set(cards) == reference_cards

    def test_peek_top_matches_next_deal(self, deck):
        top = deck.peek_top()

        assert deck.size() == AMOUNT_ALL_CARDS
        assert deck.deal() == top

    def test_peek_top_on_empty_deck(self, deck):
        deck.deal_cards(AMOUNT_ALL_CARDS)

        assert deck.peek_top() is None


class TestExhaustedDeck:
    """牌组发完后的测试."""

    def test_deal_when_deck_empty(self, deck):
        for _ in range(AMOUNT_ALL_CARDS):
            deck.deal()

        with pytest.raises(DeckExhaustedError) as exc_info:
            deck.deal()

        assert str(exc_info.value) == "Not enough remaining cards in the deck"
        assert exc_info.value.message == DECK_EXHAUSTED_MESSAGE
        assert exc_info.value.error_code == "DECK_EXHAUSTED"
        assert deck.size() == 0

    def test_exhausted_error_is_invalid_operation(self, deck):
        deck.deal_cards(AMOUNT_ALL_CARDS)

        with pytest.raises(InvalidOperationError):
            deck.deal()

    def test_exhausted_state_is_terminal(self, deck):
        deck.deal_cards(AMOUNT_ALL_CARDS)

        for _ in range(3):
            with pytest.raises(DeckExhaustedError):
                deck.deal()
            assert deck.size() == 0
            assert deck.is_empty

    def test_rejected_deal_is_logged(self, deck, caplog):
        deck.deal_cards(AMOUNT_ALL_CARDS)

        with caplog.at_level(logging.WARNING, logger="carddeck.core.deck.deck"):
            with pytest.raises(DeckExhaustedError):
                deck.deal()

        assert any(record.levelno == logging.WARNING for record in caplog.records)


class TestDealCards:
    """一次发多张牌的测试."""

    def test_deal_multiple_cards(self, deck):
        cards = deck.deal_cards(5)

        assert len(cards) == 5
        assert deck.size() == 47
        for card in cards:
            CoreUsageChecker.verify_real_objects(card, "Card")

    def test_deal_zero_cards(self, deck):
        assert deck.deal_cards(0) == []
        assert deck.size() == AMOUNT_ALL_CARDS

    def test_deal_too_many_cards_leaves_deck_untouched(self, deck):
        deck.deal_cards(50)

        with pytest.raises(DeckExhaustedError, match="Not enough remaining cards in the deck"):
            deck.deal_cards(3)

        assert deck.size() == 2

    def test_negative_count(self, deck):
        with pytest.raises(ValueError):
            deck.deal_cards(-1)

        assert deck.size() == AMOUNT_ALL_CARDS


class TestRepresentation:

    def test_str_and_repr(self, deck):
        deck.deal()

        assert str(deck) == "Deck(51 cards remaining)"
        assert repr(deck) == "Deck(cards_remaining=51)"
