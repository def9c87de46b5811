"""Single-page web quiz."""

from typing import Any, Optional

from flask import Flask, jsonify, render_template, request
from pydantic import ValidationError

from kanaquiz import STATIC_DIR, TEMPLATES_DIR
from kanaquiz.config import Settings
from kanaquiz.kana import Family, UnknownCharacter, WordGenerator, is_correct
from kanaquiz.logger import logger
from kanaquiz.schema import CheckRequest, CheckResult, ErrorResponse, WordResponse


def _error(message: str, status: int) -> Any:
    return jsonify(ErrorResponse(message=message).model_dump()), status


def create_app(settings: Optional[Settings] = None, generator: Optional[WordGenerator] = None) -> Flask:
    """Build the Flask app serving the quiz page and its JSON API."""
    settings = settings if settings is not None else Settings.from_env()
    generator = generator if generator is not None else WordGenerator()

    app = Flask(__name__, template_folder=TEMPLATES_DIR, static_folder=STATIC_DIR)
    app.config["KANAQUIZ_SETTINGS"] = settings

    def render_quiz(family: Family) -> Any:
        return render_template("quiz.html", family=family.value, families=[f.value for f in Family])

    @app.route("/", methods=["GET"])
    def index() -> Any:
        return render_quiz(Family.BOTH)

    @app.route("/hiragana", methods=["GET"])
    def hiragana() -> Any:
        return render_quiz(Family.HIRAGANA)

    @app.route("/katakana", methods=["GET"])
    def katakana() -> Any:
        return render_quiz(Family.KATAKANA)

    @app.route("/api/word", methods=["GET"])
    def word() -> Any:
        try:
            family = Family.parse(request.args.get("family", Family.BOTH.value))
        except ValueError as e:
            logger.warning(f"Rejected word request: {e}")
            return _error(str(e), 400)

        kana = generator.new_word(family)
        response = WordResponse(family=family.value, word=kana, text="".join(kana))
        return jsonify(response.model_dump())

    @app.route("/api/check", methods=["POST"])
    def check() -> Any:
        payload = request.get_json(silent=True)
        if payload is None:
            return _error("expected a JSON body", 400)
        try:
            body = CheckRequest.model_validate(payload)
            expected = generator.to_romaji(body.word)
        except ValidationError as e:
            logger.warning(f"Rejected check request: {e.error_count()} validation error(s)")
            return _error("invalid check request", 400)
        except UnknownCharacter as e:
            logger.warning(f"Rejected check request: {e}")
            return _error(str(e), 400)

        result = CheckResult(correct=is_correct(body.answer, body.word, generator), expected=expected)
        return jsonify(result.model_dump())

    return app


def serve(settings: Optional[Settings] = None) -> None:
    """Run the web quiz with Flask's server."""
    settings = settings if settings is not None else Settings.from_env()
    app = create_app(settings)
    logger.info(f"🚀 Server started on {settings.host}:{settings.port}")
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
