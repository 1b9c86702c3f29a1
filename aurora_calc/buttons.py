from typing import NamedTuple

# انواع دکمه
NUM = "num"
OP = "op"
FN = "fn"
EQUAL = "equal"


class ButtonDescriptor(NamedTuple):
    label: str
    kind: str


# ترتیب دکمه‌ها همان ترتیب شبکه‌ی چهارستونی است
BUTTONS = (
    ButtonDescriptor("DEL", FN),
    ButtonDescriptor("LOG", FN),
    ButtonDescriptor("(", NUM),
    ButtonDescriptor(")", NUM),
    ButtonDescriptor("7", NUM),
    ButtonDescriptor("8", NUM),
    ButtonDescriptor("9", NUM),
    ButtonDescriptor("÷", OP),
    ButtonDescriptor("4", NUM),
    ButtonDescriptor("5", NUM),
    ButtonDescriptor("6", NUM),
    ButtonDescriptor("×", OP),
    ButtonDescriptor("1", NUM),
    ButtonDescriptor("2", NUM),
    ButtonDescriptor("3", NUM),
    ButtonDescriptor("-", OP),
    ButtonDescriptor(".", NUM),
    ButtonDescriptor("0", NUM),
    ButtonDescriptor("+", OP),
    ButtonDescriptor("%", OP),
    ButtonDescriptor("RESULT", EQUAL),
)

BUTTONS_BY_LABEL = {b.label: b for b in BUTTONS}


def find_button(label):
    """دکمه‌ی متناظر با برچسب را برمی‌گرداند (یا None)"""
    return BUTTONS_BY_LABEL.get(label)
