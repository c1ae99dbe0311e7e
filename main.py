"""牌堆演示 - 主入口"""

import argparse
import logging
import random
from typing import List, Optional

from src.cards.card import Card, compare_rank_suit, compare_suit_rank
from src.cards.card_stack import CardStack, Orientation

# 每行显示的牌数
CARDS_PER_LINE = 13


def format_stack(stack: CardStack) -> str:
    """牌堆 → 多行文本：标题 + 每行13张"""
    lines = [f"STACK: {stack.orientation.value} ({stack.count}) ============="]
    contents = stack.contents
    for i in range(0, len(contents), CARDS_PER_LINE):
        lines.append(" ".join(str(c) for c in contents[i:i + CARDS_PER_LINE]))
    return "\n".join(lines)


def format_cards(cards: List[Card]) -> str:
    return " ".join(str(c) for c in cards)


def run_demo(draw_count: int = 10, seed: Optional[int] = None) -> None:
    """洗牌、摸牌、排序、翻面的完整演示"""
    rng = random.Random(seed)
    deck = CardStack.get_shuffled_standard_deck(Orientation.FACE_DOWN, rng=rng)
    print(format_stack(deck))
    print()

    drawn = deck.draw(draw_count)
    print("Drawn face down:")
    print(format_cards(drawn))
    print("Deck status:")
    print(format_stack(deck))
    print()

    # 用摸到的牌新建一叠牌面朝上的牌堆
    drawn_stack = CardStack.from_list(drawn, Orientation.FACE_UP)
    print("Stack from drawn cards:")
    print(format_stack(drawn_stack))
    drawn_stack.sort(compare_suit_rank)
    print(format_stack(drawn_stack))
    drawn_stack.sort(compare_rank_suit)
    print(format_stack(drawn_stack))
    print()

    # 直接改朝向：不移动牌，只改变"顶部"的解释
    print("Flipped deck.")
    deck.orientation = Orientation.FACE_UP
    print(format_stack(deck))


def main(argv: Optional[List[str]] = None):
    """命令行入口"""
    parser = argparse.ArgumentParser(description="牌堆演示")
    parser.add_argument("--draw", type=int, default=10, help="摸牌张数 (默认10)")
    parser.add_argument("--seed", type=int, default=None, help="随机种子 (默认不固定)")
    parser.add_argument("--verbose", action="store_true", help="输出调试日志")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    run_demo(draw_count=args.draw, seed=args.seed)


if __name__ == "__main__":
    main()
