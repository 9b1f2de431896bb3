"""Tests for showdown ranking.

Test coverage:
- Hands ordered by category, best first
- Tie-breaks inside every category, kickers drawn from the whole pool
- Equal hands share a rank (1, 1, 3)
- Hands are not modified by ranking
"""

import pytest
from holdem.rules import CardSet, Hand, classify, compare_results
from holdem.engine import Ranking, evaluate_hand, rank_hands


def pool(s: str) -> CardSet:
    return CardSet.from_string(s)


def hands(*lines):
    return [Hand.from_string(line) for line in lines]


class TestRankHands:
    """End-to-end ranking against shared community cards."""

    def test_full_house_tie_break(self):
        community = pool("KH KD KS AD AS")
        rankings = rank_hands(community, hands("Bar TS JD", "Foo AC TD"))

        assert len(rankings) == 2
        assert rankings[0].rank == 1
        assert rankings[0].hand.name == "Foo"
        assert str(rankings[0].result) == "Full House Ace King"
        assert rankings[1].rank == 2
        assert rankings[1].hand.name == "Bar"
        assert str(rankings[1].result) == "Full House King Ace"

    def test_ranking_str(self):
        rankings = rank_hands(pool("KH KD KS AD AS"), hands("Foo AC TD"))
        assert str(rankings[0]) == "1 Foo Full House Ace King"

    def test_ordered_by_category(self):
        community = pool("2C 4D 6S 8H TC")
        rankings = rank_hands(community, hands("High 3D 9H", "Straight 3S 5H", "Pair 8D QS"))
        assert [r.hand.name for r in rankings] == ["Straight", "Pair", "High"]
        assert [r.rank for r in rankings] == [1, 2, 3]
        assert str(rankings[0].result) == "Straight 6"

    def test_shared_board_ties(self):
        community = pool("TS JS QS KS AS")
        rankings = rank_hands(community, hands("A 2C 3D", "B 4C 5D", "C 6H 7H"))
        assert [r.rank for r in rankings] == [1, 1, 1]
        assert [r.hand.name for r in rankings] == ["A", "B", "C"]
        assert str(rankings[0].result) == "Royal Flush Spades"

    def test_tie_then_next_position(self):
        community = pool("2C 7D 9S JH KC")
        rankings = rank_hands(community, hands("A AD 3H", "B AS 3C", "C QD 4S"))
        assert [(r.hand.name, r.rank) for r in rankings] == [("A", 1), ("B", 1), ("C", 3)]

    def test_board_pair_low_hole_card_decides(self):
        community = pool("9D 9H AC KS QH")
        rankings = rank_hands(community, hands("P1 5D 4C", "P2 6D 3C"))
        assert [(r.hand.name, r.rank) for r in rankings] == [("P2", 1), ("P1", 2)]

    def test_hands_are_unchanged(self):
        players = hands("Bar TS JD", "Foo AC TD")
        before = list(players)
        rankings = rank_hands(pool("KH KD KS AD AS"), players)
        assert players == before
        assert all(isinstance(r, Ranking) for r in rankings)
        assert not hasattr(players[0], "result")

    def test_empty_table(self):
        assert rank_hands(pool("KH KD KS AD AS"), []) == []

    def test_evaluate_hand(self):
        result = evaluate_hand(Hand.from_string("P1 3S 5H"), pool("2C 4D 6S 8H TC"))
        assert str(result) == "Straight 6"


class TestTieBreaks:
    """Within a category, higher decisive cards and kickers win."""

    @pytest.mark.parametrize(
        "stronger,weaker",
        [
            # Straight flush: top card; the wheel is the lowest
            ("6H 5H 4H 3H 2H KD QC", "5H 4H 3H 2H AH KD QC"),
            # Four of a kind: quad face, then kicker
            ("9D 9H 9C 9S 2H", "8D 8H 8C 8S AH"),
            ("9D 9H 9C 9S KH", "9D 9H 9C 9S QH"),
            # Full house: triple, then pair
            ("AD AH AC KS KH", "KD KH KC AS AH"),
            ("KD KH KC AS AH", "KD KH KC QS QH"),
            # Flush: card by card
            ("AH JH 9H 5H 3H", "AH JH 9H 5H 2H"),
            # Straight: top card
            ("TD 9H 8C 7S 6H", "9D 8H 7C 6S 5H"),
            ("6D 5H 4C 3S 2H", "5D 4H 3C 2S AH"),
            # Three of a kind: triple, then kickers
            ("QD QH QC 4S 2H", "JD JH JC AS KH"),
            ("QD QH QC AS 2H", "QD QH QC KS JH"),
            # Two pair: high pair, low pair, then kicker
            ("KD KH 2C 2S 3H", "QD QH JC JS AH"),
            ("KD KH 3C 3S 2H", "KD KH 2C 2S AH"),
            ("KD KH 3C 3S AH", "KD KH 3C 3S QH"),
            # One pair: pair, then kickers
            ("5D 5H 4C 3S 2H", "4D 4H AC KS QH"),
            ("5D 5H AC 3S 2H", "5D 5H KC QS JH"),
            ("5D 5H AC KS 3H", "5D 5H AC KS 2H"),
            # High card: card by card
            ("AD JH 9C 5S 3H", "AD JH 9C 5S 2H"),
            ("AD KH 4C 3S 2H", "AD QH JC 9S 8H"),
        ],
    )
    def test_stronger_wins(self, stronger, weaker):
        strong = classify(pool(stronger))
        weak = classify(pool(weaker))
        assert strong.category == weak.category
        assert compare_results(strong, weak) > 0
        assert compare_results(weak, strong) < 0

    def test_category_beats_kickers(self):
        pair = classify(pool("2D 2H 7C 5S 3H"))
        high = classify(pool("AD KH QC JS 9H"))
        assert compare_results(pair, high) > 0

    def test_royal_flushes_tie(self):
        spades = classify(pool("TS JS QS KS AS"))
        hearts = classify(pool("TH JH QH KH AH"))
        assert compare_results(spades, hearts) == 0

    def test_kickers_continue_past_five_cards(self):
        # Same pair and the same three best kickers; the sixth card decides
        first = classify(pool("5D 5H AC KS QH 3D 2C"))
        second = classify(pool("5C 5S AD KH QD 4C 3H"))
        assert compare_results(second, first) > 0

    def test_identical_pools_tie(self):
        first = classify(pool("5D 5H AC KS QH 4D 2C"))
        second = classify(pool("5C 5S AD KH QD 4C 2H"))
        assert compare_results(first, second) == 0

    @pytest.mark.parametrize(
        "stronger,weaker",
        [
            # Flush: other pool cards follow the five flush cards
            ("AH JH 9H 5H 3H KD 2C", "AH JH 9H 5H 3H QD 2C"),
            # Straight: same top card, then the rest of the pool
            ("9D 8H 7C 6S 5H KD 2C", "9D 8H 7C 6S 5H QD 2C"),
            # High card: the whole pool, card by card
            ("AD JH 9C 5S 3H 2C 8D", "AD JH 9C 5S 3H 2C 7D"),
        ],
    )
    def test_pool_kickers_in_every_category(self, stronger, weaker):
        assert compare_results(classify(pool(stronger)), classify(pool(weaker))) > 0
