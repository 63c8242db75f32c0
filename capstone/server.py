"""Flask server for the capstone companion.

Serves title and project generation, the chapter chat endpoint backed by
the upstream model, and document export.
"""

import io
import logging
from typing import Any

from flask import Flask, jsonify, request, send_file
from flask_cors import CORS
from langchain_anthropic import ChatAnthropic
from langchain_core.messages import HumanMessage, SystemMessage
from pydantic import ValidationError

from capstone.companion import build_system_prompt
from capstone.config import settings
from capstone.editor import DocumentEditor
from capstone.errors import (
    ConfigurationError,
    ExportError,
    InputValidationError,
    log_error_with_context,
    notice_for_error,
)
from capstone.generation import generate_title_options
from capstone.graphs import run_generation
from capstone.nodes import parse_form, validate_form
from capstone.output import MEDIA_TYPES, build_outline_text, render_document, safe_filename
from capstone.state.enums import ExportFormat, GenerationStatus
from capstone.state.models import ChatRequest, DocumentChapter, GeneratedProject

logger = logging.getLogger(__name__)

app = Flask(__name__)

# CORS restricted to the configured frontend origins
CORS(app, origins=settings.cors_origins)

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again in a moment."
QUOTA_MESSAGE = "AI credits depleted. Please add credits to continue."


# =============================================================================
# Upstream Model
# =============================================================================

_chat_model: ChatAnthropic | None = None


def get_chat_model() -> ChatAnthropic:
    """Return the shared upstream chat model, creating it on first use.

    Raises:
        ConfigurationError: If ANTHROPIC_API_KEY is not configured
    """
    global _chat_model
    if _chat_model is None:
        if not settings.anthropic_api_key:
            raise ConfigurationError("ANTHROPIC_API_KEY is not configured", setting="ANTHROPIC_API_KEY")
        _chat_model = ChatAnthropic(
            model=settings.default_model,
            temperature=settings.chat_temperature,
            max_tokens=settings.chat_max_tokens,
            api_key=settings.anthropic_api_key,
        )
    return _chat_model


def _message_text(content: Any) -> str:
    if isinstance(content, list):
        return " ".join(
            item if isinstance(item, str) else item.get("text", "")
            for item in content
        )
    return str(content or "")


def _notice_response(error: Exception, status: int):
    notice = notice_for_error(error)
    return jsonify({
        "error": notice.description,
        "notice": notice.model_dump(mode="json"),
    }), status


def _json_body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


# =============================================================================
# Routes
# =============================================================================


@app.route("/health")
def health():
    return jsonify({"status": "ok"})


@app.route("/api/chat", methods=["POST"])
def chat():
    """Relay one chapter chat message to the upstream model.

    Body: {message, chapterNumber, chapterTitle}. Responds {response} or
    {error} with 400, 402, 429 or 500.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid input", "details": "Request body must be a JSON object"}), 400

    try:
        chat_request = ChatRequest.model_validate(data)
    except ValidationError as e:
        details = ", ".join(err["msg"] for err in e.errors())
        logger.warning(f"Rejected chat request: {details}")
        return jsonify({"error": "Invalid input", "details": details}), 400

    logger.info(
        f"Processing chat for Chapter {chat_request.chapter_number}: {chat_request.chapter_title}"
    )

    try:
        model = get_chat_model()
        result = model.invoke([
            SystemMessage(content=build_system_prompt(
                chat_request.chapter_number, chat_request.chapter_title
            )),
            HumanMessage(content=chat_request.message),
        ])
    except ConfigurationError as e:
        log_error_with_context(e, node="api_chat")
        return jsonify({"error": e.message}), 500
    except Exception as e:
        status_code = getattr(e, "status_code", None)
        log_error_with_context(e, node="api_chat", context={"status_code": status_code})
        if status_code == 429:
            return jsonify({"error": RATE_LIMIT_MESSAGE}), 429
        if status_code == 402:
            return jsonify({"error": QUOTA_MESSAGE}), 402
        return jsonify({"error": str(e) or "Unknown error"}), 500

    text = _message_text(result.content).strip()
    if not text:
        logger.error("Upstream model returned an empty reply")
        return jsonify({"error": "No response from AI"}), 500

    return jsonify({"response": text})


@app.route("/api/titles", methods=["POST"])
def titles():
    """Generate title options for a project form."""
    try:
        form = validate_form(parse_form(_json_body()))
    except InputValidationError as e:
        logger.warning(f"Rejected title request: {e.message}")
        return _notice_response(e, 400)

    return jsonify({"titles": generate_title_options(form)})


@app.route("/api/projects", methods=["POST"])
def projects():
    """Generate a complete project, optionally for a chosen title."""
    data = dict(_json_body())
    selected_title = data.pop("title", None) or None

    try:
        result = run_generation(data, selected_title=selected_title)
    except Exception as e:
        log_error_with_context(e, node="api_projects")
        return _notice_response(e, 500)

    if result.get("status") == GenerationStatus.FAILED:
        errors = result.get("errors", [])
        status = 400 if errors and errors[-1].category == "validation_error" else 500
        notice = result["notice"]
        return jsonify({
            "error": notice.description,
            "notice": notice.model_dump(mode="json"),
        }), status

    project = result["project"]
    return jsonify({
        "project": project.model_dump(mode="json"),
        "titleOptions": result.get("title_options", []),
        "outline": build_outline_text(project),
    })


@app.route("/api/export", methods=["POST"])
def export():
    """Download the document as .docx (default) or plain text.

    Body: {project} for a freshly generated project, or {title, chapters}
    with editor chapters.
    """
    data = _json_body()
    export_format = request.args.get("format", ExportFormat.DOCX.value)

    try:
        if "project" in data:
            editor = DocumentEditor(GeneratedProject.model_validate(data["project"]))
            title, chapters = editor.title, editor.chapters
        else:
            title = data["title"]
            chapters = [DocumentChapter.model_validate(c) for c in data["chapters"]]
    except (KeyError, TypeError, ValidationError) as e:
        error = ExportError(f"Invalid export request: {e}", export_format=export_format)
        log_error_with_context(error, node="api_export", level=logging.WARNING)
        return _notice_response(error, 400)

    try:
        payload = render_document(title, chapters, export_format)
    except ExportError as e:
        log_error_with_context(e, node="api_export")
        return _notice_response(e, 500)

    fmt = ExportFormat(export_format)
    return send_file(
        io.BytesIO(payload),
        mimetype=MEDIA_TYPES[fmt],
        as_attachment=True,
        download_name=f"{safe_filename(title)}.{fmt.value}",
    )


def main():
    """Run the development server."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    for problem in settings.validate_server():
        logger.warning(f"Configuration: {problem}")

    print("\n" + "=" * 60)
    print("Capstone Companion Server")
    print("=" * 60)
    print(f"\nAPI: http://127.0.0.1:{settings.port}")
    print("\nPress Ctrl+C to stop\n")
    app.run(debug=True, port=settings.port, host="0.0.0.0")


if __name__ == "__main__":
    main()
