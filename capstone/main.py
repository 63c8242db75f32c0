"""Interactive CLI for generating and editing a capstone project."""

import logging

from capstone.companion import CompanionSession, create_companion
from capstone.config import settings
from capstone.editor import DocumentEditor
from capstone.errors import CapstoneError, InputValidationError, notice_for_error
from capstone.generation import assemble_project, default_selector, generate_title_options
from capstone.nodes import parse_form, validate_form
from capstone.output import build_outline_text, export_document
from capstone.state.models import FormInput, Notice

logger = logging.getLogger(__name__)


def show_notice(notice: Notice) -> None:
    print(f"\n[{notice.title}] {notice.description}")


def prompt_form() -> FormInput | None:
    """Ask for the project form; None when field or topic is missing."""
    data = {
        "field": input("Field of study (e.g. computer-science): ").strip(),
        "topic": input("Research topic: ").strip(),
        "keywords": input("Keywords (comma-separated): ").strip(),
        "researchType": input("Research type (e.g. quantitative): ").strip(),
    }
    try:
        return validate_form(parse_form(data))
    except InputValidationError as e:
        show_notice(notice_for_error(e))
        return None


def choose_title(options: list[str]) -> str:
    print("\nTitle options:")
    for i, title in enumerate(options, start=1):
        print(f"  {i}. {title}")
    while True:
        choice = input(f"\nPick a title [1-{len(options)}]: ").strip() or "1"
        if choice.isdigit() and 1 <= int(choice) <= len(options):
            return options[int(choice) - 1]
        print("Please enter one of the listed numbers.")


def print_chapter(editor: DocumentEditor) -> None:
    chapter = editor.get_chapter(editor.active_chapter)
    print(f"\nChapter {chapter.number}: {chapter.title} ({chapter.word_count} words)")
    print("-" * 60)
    print(chapter.content.introduction)
    for section in chapter.content.sections:
        print(f"\n## {section.title}\n{section.content}")
    print(f"\n{chapter.content.conclusion}")


def main():
    """Interactive CLI: generate a project, then edit, chat and export."""
    logging.basicConfig(level=settings.log_level)

    print("=" * 60)
    print("Capstone Companion")
    print("=" * 60)

    errors = settings.validate()
    if errors:
        print("\nConfiguration Issues:")
        for error in errors:
            print(f"   - {error}")
        print("\nPlease check your .env file.")
        return

    form = prompt_form()
    if form is None:
        return

    selector = default_selector()
    title = choose_title(generate_title_options(form, selector=selector))
    project = assemble_project(form, chosen_title=title, selector=selector)
    print(f"\n{build_outline_text(project)}")

    editor = DocumentEditor(project)
    companion = create_companion()
    sessions: dict[int, CompanionSession] = {}

    print("\nCommands:")
    print("  /chapter N - Show chapter N")
    print("  /next, /prev - Move between chapters")
    print("  /chat <message> - Ask the companion about the current chapter")
    print("  /apply <introduction|conclusion|section title> - Insert the last suggestion")
    print("  /save - Save the document")
    print("  /export [docx|txt] - Export the document")
    print("  /quit - Exit")
    print("-" * 60)

    while True:
        try:
            user_input = input(f"\n[Chapter {editor.active_chapter}] > ").strip()
            if not user_input:
                continue

            command, _, arg = user_input.partition(" ")
            command = command.lower()
            arg = arg.strip()
            chapter = editor.get_chapter(editor.active_chapter)
            session = sessions.get(chapter.number)
            if session is None:
                session = sessions[chapter.number] = CompanionSession(
                    chapter.number, chapter.title, companion
                )

            if command == "/quit":
                print("Goodbye!")
                break
            elif command == "/chapter" and arg.isdigit():
                editor.select_chapter(int(arg))
                print_chapter(editor)
            elif command == "/next":
                editor.next_chapter()
                print_chapter(editor)
            elif command == "/prev":
                editor.previous_chapter()
                print_chapter(editor)
            elif command == "/chat" and arg:
                if len(session.messages) == 1:
                    print(f"\nCompanion: {session.messages[0].content}")
                    print(f"Try: {' | '.join(session.suggestions())}")
                turn = session.send(arg)
                if turn:
                    print(f"\nCompanion: {turn.reply.content}")
                    if turn.notice:
                        show_notice(turn.notice)
            elif command == "/apply" and arg:
                content = session.insertable_content()
                if content is None:
                    print("No suggestion to apply yet. Ask the companion first.")
                    continue
                editor.apply_suggestion(chapter.number, arg, content)
                print(f"Applied to {arg}. Chapter now has {chapter.word_count} words.")
            elif command == "/save":
                show_notice(editor.save())
            elif command == "/export":
                result = export_document(editor.title, editor.chapters, export_format=arg or "docx")
                print(f"Exported to {result.path}")
            else:
                print("Unknown command.")

        except KeyboardInterrupt:
            print("\n\nGoodbye!")
            break
        except CapstoneError as e:
            show_notice(notice_for_error(e))
        except (KeyError, IndexError, ValueError) as e:
            print(f"\nError: {e}")


if __name__ == "__main__":
    main()
