import pytest

from finsafe.runtime.classify import (
    DEFAULT_SAFETY_TIPS,
    LIKELY_SCAM,
    POSSIBLY_SAFE,
    SUSPICIOUS,
    infer_verdict,
    parse_reply,
)


def test_explanation_concatenates_following_lines():
    text = "Explanation: The offer is fake.\nIt asks for money upfront.\n\n  Report it.  \n"
    parsed = parse_reply(text)
    assert parsed.explanation == "The offer is fake. It asks for money upfront. Report it."


def test_explanation_label_is_case_insensitive_and_colon_optional():
    assert parse_reply("EXPLANATION   no colon here").explanation == "no colon here"
    assert parse_reply("explanation:tight").explanation == "tight"


def test_safety_tips_bullets_and_numbers():
    text = "\n".join([
        "Explanation: risky",
        "Safety Tips:",
        "- dash tip",
        "• dot tip",
        "* star tip",
        "12. numbered tip",
        "not a tip, ignored",
    ])
    parsed = parse_reply(text)
    assert parsed.explanation == "risky"
    assert parsed.safety_tips == ["dash tip", "dot tip", "star tip", "numbered tip"]


def test_lines_after_safety_tips_do_not_extend_explanation():
    parsed = parse_reply("Explanation: a\nSafety tips\nb\n- c")
    assert parsed.explanation == "a"
    assert parsed.safety_tips == ["c"]


def test_new_explanation_line_restarts_accumulator():
    parsed = parse_reply("Explanation: first\nmore\nExplanation: second")
    assert parsed.explanation == "second"


def test_no_tips_falls_back_to_default_list_in_order():
    parsed = parse_reply("Explanation: ok\nSafety Tips:\nnothing bulleted here")
    assert parsed.safety_tips == list(DEFAULT_SAFETY_TIPS)
    assert len(parsed.safety_tips) == 5
    assert parsed.safety_tips[-1] == "Never share OTP, PIN, or password with anyone"


def test_only_newline_separates_lines():
    parsed = parse_reply("Explanation: a\u2028Safety tips")
    assert parsed.explanation == "a\u2028Safety tips"
    assert parsed.safety_tips == list(DEFAULT_SAFETY_TIPS)


def test_carriage_return_is_stripped_with_the_line():
    parsed = parse_reply("Explanation: a\r\nSafety Tips:\r\n- b\r\n")
    assert parsed.explanation == "a"
    assert parsed.safety_tips == ["b"]


def test_numbered_tips_need_ascii_digits():
    parsed = parse_reply("Safety Tips:\n١. arabic-indic digit")
    assert parsed.safety_tips == list(DEFAULT_SAFETY_TIPS)


def test_unstructured_text_degrades_gracefully():
    parsed = parse_reply("just a normal answer\n- with a stray bullet")
    assert parsed.explanation == ""
    assert parsed.safety_tips == list(DEFAULT_SAFETY_TIPS)
    assert parse_reply("").explanation == ""


def test_default_list_is_a_fresh_copy():
    first = parse_reply("")
    first.safety_tips.append("mutated")
    assert parse_reply("").safety_tips == list(DEFAULT_SAFETY_TIPS)


@pytest.mark.parametrize("text, expected", [
    ("This looks like fraud to me", SUSPICIOUS),
    ("Likely a SCAM", LIKELY_SCAM),
    ("probably malicious link", LIKELY_SCAM),
    ("High risk and dangerous", LIKELY_SCAM),
    ("A suspicious sender", SUSPICIOUS),
    ("This is likely fine", POSSIBLY_SAFE),
    ("", POSSIBLY_SAFE),
])
def test_infer_verdict(text, expected):
    assert infer_verdict(text) == expected


def test_verdict_badges_and_text():
    assert (POSSIBLY_SAFE.label, POSSIBLY_SAFE.badge) == ("Possibly Safe", "safe")
    assert (SUSPICIOUS.label, SUSPICIOUS.badge) == ("Suspicious", "warning")
    assert (LIKELY_SCAM.label, LIKELY_SCAM.badge) == ("Likely Scam", "danger")
    assert POSSIBLY_SAFE.text == "This message appears to be safe"
