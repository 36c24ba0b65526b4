"""
Build the reference answer list from the archive of past Wordle answers.

- Downloads the archive page and pulls rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Keeps the 5-letter answer, lowercased, first occurrence only.
- Writes one word per line, then runs the word list validator on the result.

List order is the tie-break order of the recommenders, so calendar order
(the default) and --sort give different recommendations on ties.

Usage:
    python -m script.fetch_answers --out packages/datasets/data/answers_5.txt
"""

import argparse
import re
from typing import List

import requests
from bs4 import BeautifulSoup

from packages.datasets import DEFAULT_ANSWERS_PATH, pretty_summary, validate_wordlist, write_lines

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def parse_answers(html: str) -> List[str]:
    """Answers in page order, duplicates dropped."""
    text = BeautifulSoup(html, "html.parser").get_text("\n", strip=True)
    return list(dict.fromkeys(m.group(2).lower() for m in ROW_RE.finditer(text)))


def fetch_answers(url: str = URL) -> List[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return parse_answers(r.text)


def main():
    ap = argparse.ArgumentParser(description="Download past Wordle answers into a word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default=str(DEFAULT_ANSWERS_PATH))
    ap.add_argument("--sort", action="store_true",
                    help="alphabetical order instead of calendar order")
    args = ap.parse_args()

    answers = fetch_answers(args.url)
    if args.sort:
        answers.sort()

    path = write_lines(answers, args.out)
    print(pretty_summary(validate_wordlist(path)))
    print(f"Wrote {len(answers)} answers -> {path}")


if __name__ == "__main__":
    main()
