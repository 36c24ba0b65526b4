from script.fetch_answers import parse_answers

PAGE = """
<html><body><ul>
<li>2024-01-02 (Tue) 928 CRANE</li>
<li>2024-01-01 (Mon) 927 TRACE</li>
<li>2023-12-31 (Sun) 926 CRANE</li>
<li>Not an answer row 12 HELLO</li>
</ul></body></html>
"""


def test_parse_answers_keeps_calendar_order_without_duplicates():
    assert parse_answers(PAGE) == ["crane", "trace"]
