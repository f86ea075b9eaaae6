"""Default Korean blacklist used to seed :class:`WordFilter`."""

BAD_WORDS = [
    "시발",
    "씨발",
    "씨바",
    "시바",
    "ㅅㅂ",
    "ㅆㅂ",
    "병신",
    "븅신",
    "ㅂㅅ",
    "개새끼",
    "개새",
    "개색기",
    "좆",
    "존나",
    "졸라",
    "지랄",
    "ㅈㄹ",
    "미친놈",
    "미친년",
    "썅",
    "니미",
    "느금마",
    "엠창",
    "염병",
    "닥쳐",
    "꺼져",
    "엿먹어",
    "등신",
    "호로새끼",
    "애미",
]

__all__ = ["BAD_WORDS"]
