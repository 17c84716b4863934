import json
from pathlib import Path

import pytest

ENCRYPTION = {
    "title": "Encryption",
    "questions": [
        {
            "question": "Which encryption uses one shared key?",
            "options": ["Asymmetric", "Symmetric", "Hashing", "Salting"],
            "correct": 1,
            "explanation": "Symmetric encryption uses one key.",
        },
        {
            "question": "Which are asymmetric algorithms?",
            "options": ["RSA", "AES", "ECC", "3DES"],
            "correct": [0, 2],
            "explanation": "RSA and ECC use key pairs.",
        },
    ],
}

PRACTICE_TEST = {
    "title": "Practice Test 2",
    "questions": [
        {
            "question": "What is phishing?",
            "options": ["Email fraud", "Tailgating"],
            "correct": 0,
            "explanation": "",
        }
    ],
}


def write_content(directory: Path, content_id: str, payload: object) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{content_id}.json"
    if isinstance(payload, str):
        path.write_text(payload, encoding="utf-8")
    else:
        path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "data"
    write_content(directory, "encryption", ENCRYPTION)
    write_content(directory, "practice-test2", PRACTICE_TEST)
    return directory


@pytest.fixture
def write_file():
    return write_content


@pytest.fixture
def encryption_payload() -> dict:
    return json.loads(json.dumps(ENCRYPTION))
