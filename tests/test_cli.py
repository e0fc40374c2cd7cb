"""命令行入口与终端渲染测试"""

from main import main
from src.engine.card import Rank, Suit, RegularCard, PHOENIX
from src.engine.hand import Hand
from src.ui.renderer import TerminalRenderer, hand_type_name


class TestRenderer:

    def setup_method(self):
        self.renderer = TerminalRenderer(color=False)

    def test_format_cards_plain(self):
        cards = [PHOENIX, RegularCard(Rank.TEN, Suit.HEART)]
        assert self.renderer.format_cards(cards) == "Phoenix ♥10"

    def test_format_cards_colored(self):
        text = TerminalRenderer(color=True).format_cards([RegularCard(Rank.TWO, Suit.HEART)])
        assert "♥2" in text
        assert text.startswith("\033[")

    def test_describe_hand(self):
        hand = Hand([RegularCard(Rank(r), Suit.SPADE) for r in range(2, 7)])
        text = self.renderer.describe_hand(hand)
        assert "同花顺炸弹" in text
        assert "SIX" in text

    def test_unclassifiable_name(self):
        assert hand_type_name(None) == "不成牌型"


class TestMain:

    def test_classify(self, capsys):
        code = main(["--no-color", "classify", "H2", "H3", "H4", "H6", "Phoenix"])
        assert code == 0
        assert "顺子" in capsys.readouterr().out

    def test_classify_invalid_combination(self):
        assert main(["--no-color", "classify", "H2", "S9"]) == 1

    def test_compare(self, capsys):
        code = main(["--no-color", "compare", "H2 C2 D2 S2", "H9 D10 SJ CQ HK"])
        assert code == 0
        assert "能压过" in capsys.readouterr().out

    def test_bad_card_text(self, capsys):
        assert main(["classify", "Z9"]) == 2
        assert "错误" in capsys.readouterr().err

    def test_deal(self, capsys):
        code = main(["--no-color", "deal", "--seed", "3"])
        assert code == 0
        out = capsys.readouterr().out
        assert out.count("14张") == 4

    def test_duplicate_cards_rejected(self, capsys):
        assert main(["classify", "H2", "H2", "H2", "H2"]) == 2
        assert "重复" in capsys.readouterr().err

    def test_compare_duplicate_cards_rejected(self):
        assert main(["compare", "Phoenix Phoenix", "H3"]) == 2

    def test_deal_zero_players_is_error(self, capsys):
        assert main(["deal", "--players", "0"]) == 2
        assert "错误" in capsys.readouterr().err

    def test_deal_zero_cards_is_error(self):
        assert main(["deal", "--cards", "0"]) == 2
