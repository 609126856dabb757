"""Prompt construction for coaching advice. Pure, no I/O."""

from __future__ import annotations

from cardio_engine.models.enums import Gender

_GENDER_WORDS = {
    Gender.MALE: "Male",
    Gender.FEMALE: "Female",
}

_ADVICE_TEMPLATE = """\
Act as an expert sports coach and cardiologist.
I have a user with the following characteristics:
- Age: {age} years
- Sex: {sex}
- Maximum heart rate (age-predicted): {max_hr} bpm.

Give 3 short, practical and motivating tips on how to start training while
respecting cardio zones.
Format the answer as plain prose or a simple bulleted list.
Be concise (100 words maximum).
"""


def build_advice_prompt(age: int, gender: Gender | str, max_hr: int) -> str:
    """Fill the coaching prompt for one user."""
    sex = _GENDER_WORDS[Gender(gender)]
    return _ADVICE_TEMPLATE.format(age=age, sex=sex, max_hr=max_hr)
