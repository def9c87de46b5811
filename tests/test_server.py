"""Tests for the web quiz."""
import pytest
from kanaquiz.kana import Family, members, to_romaji


class TestPages:
    """Test the HTML routes."""

    @pytest.mark.parametrize("path,family", [
        ("/", "both"),
        ("/hiragana", "hiragana"),
        ("/katakana", "katakana"),
    ])
    def test_quiz_page(self, client, path, family):
        response = client.get(path)
        assert response.status_code == 200
        html = response.get_data(as_text=True)
        assert f'data-family="{family}"' in html
        assert 'id="kana-word"' in html
        assert "/static/main.js" in html

    def test_static_script(self, client):
        response = client.get("/static/main.js")
        assert response.status_code == 200
        assert b"/api/word" in response.data
        response.close()

    def test_unknown_page(self, client):
        assert client.get("/kanji").status_code == 404


class TestWordApi:
    """Test GET /api/word."""

    @pytest.mark.parametrize("family", list(Family))
    def test_word_from_family(self, client, family):
        data = client.get(f"/api/word?family={family.value}").get_json()
        assert data["family"] == family.value
        assert 1 <= len(data["word"]) <= 5
        assert all(c in members(family) for c in data["word"])
        assert data["text"] == "".join(data["word"])

    def test_default_family(self, client):
        assert client.get("/api/word").get_json()["family"] == "both"

    def test_family_is_case_insensitive(self, client):
        assert client.get("/api/word?family=Katakana").get_json()["family"] == "katakana"

    def test_unknown_family(self, client):
        response = client.get("/api/word?family=kanji")
        assert response.status_code == 400
        assert "kanji" in response.get_json()["message"]


class TestCheckApi:
    """Test POST /api/check."""

    def test_correct(self, client):
        data = client.post("/api/check", json={"word": ["あ", "い"], "answer": "AI"}).get_json()
        assert data == {"correct": True, "expected": "ai"}

    def test_full_width_answer(self, client):
        data = client.post("/api/check", json={"word": ["シ"], "answer": "ｓｈｉ"}).get_json()
        assert data["correct"] is True

    def test_incorrect(self, client):
        data = client.post("/api/check", json={"word": ["ぢ"], "answer": "di"}).get_json()
        assert data == {"correct": False, "expected": "ji"}

    def test_round_trip_with_generated_word(self, client):
        word = client.get("/api/word?family=both").get_json()["word"]
        data = client.post("/api/check", json={"word": word, "answer": to_romaji(word)}).get_json()
        assert data["correct"] is True

    def test_unknown_character(self, client):
        response = client.post("/api/check", json={"word": ["漢"], "answer": "kan"})
        assert response.status_code == 400
        assert "漢" in response.get_json()["message"]

    @pytest.mark.parametrize("payload", [
        {"answer": "a"},
        {"word": "あ", "answer": "a"},
        {"word": ["あ"] * 17, "answer": "a"},
        ["あ"],
    ])
    def test_invalid_body(self, client, payload):
        response = client.post("/api/check", json=payload)
        assert response.status_code == 400
        assert response.get_json()["message"] == "invalid check request"

    def test_missing_json(self, client):
        response = client.post("/api/check", data="ai", content_type="text/plain")
        assert response.status_code == 400


class TestCustomTable:
    """The API checks answers with the app's own table."""

    def test_check_uses_app_generator(self, rng):
        from kanaquiz.config import Settings
        from kanaquiz.kana import CharacterSet, WordGenerator
        from kanaquiz.server import create_app

        generator = WordGenerator(CharacterSet({'ぢ': "di"}, {'ヂ': "di"}), rng)
        client = create_app(Settings(), generator).test_client()

        data = client.post("/api/check", json={"word": ["ぢ"], "answer": "DI"}).get_json()
        assert data == {"correct": True, "expected": "di"}


class TestQuizScript:
    """Test the page script's answer flow."""

    @pytest.fixture
    def script(self, client):
        response = client.get("/static/main.js")
        text = response.get_data(as_text=True)
        response.close()
        return text

    def test_new_word_only_after_correct_answer(self, script):
        handler = script[script.index("async function handleInput"):]
        correct_branch = handler[handler.index("if (result.correct)"):handler.index("} else {")]
        incorrect_branch = handler[handler.index("} else {"):handler.index("} finally {")]

        assert "generateWord()" in correct_branch
        assert "generateWord()" not in incorrect_branch

    def test_input_locked_while_checking(self, script):
        handler = script[script.index("async function handleInput"):]
        assert "|| checking" in handler
        assert handler.index("inputField.disabled = true") < handler.index("await checkAnswer")
        assert "inputField.disabled = false" in handler[handler.index("} finally {"):]
