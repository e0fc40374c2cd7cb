"""规则引擎异常定义"""


class RulesError(Exception):
    """规则引擎所有异常的基类"""


class InvariantViolation(RulesError):
    """
    契约被破坏：例如两张相同的特殊牌互相比较。
    每副牌中每种特殊牌只有一张，正常构造的输入不会触发。
    """


class CardParseError(RulesError, ValueError):
    """牌面文本无法解析"""


class DealError(RulesError):
    """牌堆剩余张数不足以发牌"""
