import csv
import json

from packages.dictionaries import create_dictionary
from packages.engine import session_score
from packages.harness import run_batch, run_case, write_csv, write_manifest

VOCAB = ["silk", "milk", "worm", "works", "slow", "lows", "owls", "skim", "wilk", "owl", "mirror"]


def test_run_case_smoke():
    # "wilk" passes the letter check but is not in the dictionary
    d = create_dictionary("wordlist", words=[w for w in VOCAB if w != "wilk"])
    r = run_case("silkworm", vocabulary=VOCAB, dictionary=d, seed=42)
    assert r["root"] == "silkworm"
    assert sorted(r["words"]) == sorted(["silk", "milk", "worm", "works", "slow", "lows", "owls", "skim"])
    assert r["accepted"] == 8
    assert r["score"] == session_score(r["words"])
    assert r["rejections"] == {"NOT_A_WORD": 1}


def test_run_batch_and_outputs(tmp_path):
    d = create_dictionary("wordlist", words=VOCAB)
    results = run_batch(["silkworm", "absolute", "keyboard"], vocabulary=VOCAB, dictionary=d,
                        seed=1, sample=2)
    assert [r["root"] for r in results] == ["silkworm", "absolute"]
    assert results[1]["accepted"] == 0 and results[1]["score"] == 0

    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["root"] == "silkworm"
    assert int(rows[0]["score"]) == results[0]["score"]
    assert rows[0]["not_a_word"] == "0"

    man = write_manifest({"run_id": "x", "summary": {"roots": 2}}, str(tmp_path / "m.json"))
    assert json.loads(open(man, encoding="utf-8").read())["summary"]["roots"] == 2
