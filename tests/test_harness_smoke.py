import json

from packages.harness import format_statistics, run_batch, run_case, summarize, write_csv, write_manifest
from packages.recommenders import create_recommender

WORDS = ["crane", "trace", "crate", "react", "cater", "plant", "stair"]


def test_run_case_first_matches():
    rec = create_recommender("first_matches", WORDS)
    r = run_case(rec, "stair")
    assert r["success"] is True
    assert r["history"] == [("crane", "BYGBB"), ("stair", "GGGGG")]
    assert r["guesses"] == 2 and r["within_limit"] is True


def test_run_case_with_fixed_first_guess():
    rec = create_recommender("branch_bound", WORDS)
    r = run_case(rec, "crate", first_guess="plant")
    assert r["history"][0] == ("plant", "BBGBY")
    assert r["success"] is True


def test_run_batch_branch_bound_solves_every_answer():
    rec = create_recommender("branch_bound", WORDS)
    seen = []
    results = run_batch(rec, WORDS, progress=lambda done, total: seen.append((done, total)))
    assert all(r["success"] for r in results)
    assert all(r["history"][-1][1] == "GGGGG" for r in results)
    assert {r["recommender_id"] for r in results} == {"branch_bound"}
    assert seen[-1] == (len(WORDS), len(WORDS))


def test_run_batch_sample_prefix():
    rec = create_recommender("first_matches", WORDS)
    results = run_batch(rec, WORDS, sample=3)
    assert [r["answer"] for r in results] == WORDS[:3]


def _result(guesses, success=True):
    return {"answer": "x", "success": success, "guesses": guesses, "time_ms": 0.0, "history": []}


def test_summarize_and_format():
    results = [_result(g) for g in (3, 4, 4, 6, 7)] + [_result(2, success=False)]
    s = summarize(results)
    assert s["games"] == 6 and s["failures"] == 1 and s["over_limit"] == 1
    assert (s["min"], s["max"]) == (3, 7)
    assert abs(s["mean"] - 4.8) < 1e-9
    assert s["histogram"] == [(3, 1), (4, 2), (5, 0), (6, 1), (7, 1)]

    text = format_statistics(s)
    assert "There has been 1 failures." in text
    assert "Max guesses:     7" in text
    assert "Average guesses: 4.8" in text
    assert text.splitlines()[-1].strip() == "Total: 5"


def test_summarize_nothing_solved():
    s = summarize([_result(6, success=False)])
    assert s["mean"] is None and s["histogram"] == []
    assert "1 failures" in format_statistics(s)


def test_write_outputs(tmp_path):
    rec = create_recommender("first_matches", WORDS)
    results = run_batch(rec, WORDS[:2])
    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"))
    header = open(csv_path, encoding="utf-8").readline().strip().split(",")
    assert header[:6] == ["recommender", "answer", "success", "guesses", "within_limit", "time_ms"]
    assert "guess_1" in header and "patt_1" in header

    m = write_manifest({"summary": summarize(results)}, str(tmp_path / "m.json"))
    assert json.loads(open(m, encoding="utf-8").read())["summary"]["games"] == 2


def test_run_case_with_opening_outside_the_pool():
    rec = create_recommender("branch_bound", ["crane", "trace"], skip_first_search=True)
    r = run_case(rec, "crane")
    assert r["history"] == [("raise", "YYBBG"), ("crane", "GGGGG")]
    assert r["success"] is True and r["guesses"] == 2
