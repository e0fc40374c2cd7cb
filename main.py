"""Tichu 牌型裁判 - 命令行入口"""

import argparse
import logging
import os
import random
import sys

from src.engine.errors import CardParseError
from src.engine.hand import Hand
from src.engine.notation import parse_cards
from src.game.config import GameConfig
from src.game.deck import deal_hands
from src.ui.renderer import TerminalRenderer

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """程序启动时调用一次"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def cmd_deal(args: argparse.Namespace, renderer: TerminalRenderer) -> int:
    """洗牌发牌并展示"""
    env = GameConfig.from_env()
    config = GameConfig(
        num_players=args.players if args.players is not None else env.num_players,
        cards_per_player=args.cards if args.cards is not None else env.cards_per_player,
        seed=args.seed if args.seed is not None else env.seed,
    )
    hands = deal_hands(config, random.Random(config.seed))
    renderer.show_deal(hands)
    return 0


def cmd_classify(args: argparse.Namespace, renderer: TerminalRenderer) -> int:
    """识别一手牌"""
    hand = Hand(parse_cards(" ".join(args.cards)))
    renderer.show_hand(hand)
    return 0 if hand.hand_type() is not None else 1


def cmd_compare(args: argparse.Namespace, renderer: TerminalRenderer) -> int:
    """判断 hand 能否压过 previous"""
    hand = Hand(parse_cards(args.hand))
    previous = Hand(parse_cards(args.previous))
    result = hand.can_be_played_on(previous)
    renderer.show_comparison(hand, previous, result)
    return 0 if result else 1


def cmd_serve(args: argparse.Namespace, renderer: TerminalRenderer) -> int:
    """启动 HTTP 规则服务"""
    import uvicorn

    logger.info("启动 HTTP 规则服务 %s:%d", args.host, args.port)
    uvicorn.run("src.web.server:app", host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tichu 牌型裁判")
    parser.add_argument(
        "--log-level", default=os.getenv("LOG_LEVEL", "WARNING"),
        help="日志级别 (默认读取 LOG_LEVEL，否则 WARNING)",
    )
    parser.add_argument("--no-color", action="store_true", help="关闭彩色输出")
    sub = parser.add_subparsers(dest="command", required=True)

    p_deal = sub.add_parser("deal", help="洗牌并发牌")
    p_deal.add_argument("--seed", type=int, default=None, help="随机种子")
    p_deal.add_argument("--players", type=int, default=None, help="玩家人数 (默认4)")
    p_deal.add_argument("--cards", type=int, default=None, help="每人张数 (默认14)")
    p_deal.set_defaults(func=cmd_deal)

    p_classify = sub.add_parser("classify", help="识别牌型，如: classify H2 H3 H4 H5 Phoenix")
    p_classify.add_argument("cards", nargs="+")
    p_classify.set_defaults(func=cmd_classify)

    p_compare = sub.add_parser("compare", help='压牌判定，如: compare "SA" "HK"')
    p_compare.add_argument("hand", help="准备出的牌")
    p_compare.add_argument("previous", help="上家出的牌")
    p_compare.set_defaults(func=cmd_compare)

    p_serve = sub.add_parser("serve", help="启动 HTTP 规则服务")
    p_serve.add_argument("--host", default="127.0.0.1")
    p_serve.add_argument("--port", type=int, default=8000)
    p_serve.set_defaults(func=cmd_serve)

    return parser


def main(argv=None) -> int:
    """命令行入口"""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    renderer = TerminalRenderer(color=not args.no_color)
    try:
        return args.func(args, renderer)
    except (CardParseError, ValueError) as e:
        print(f"错误: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
