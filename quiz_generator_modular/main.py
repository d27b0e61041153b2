"""
Terminal entry point for the Quiz Generator
Drives the same form controller as the browser page against a running API
"""

from quiz_generator_modular.client.quiz_form import QuizFormController
from quiz_generator_modular.config import config, configure_logging, initialize_all
from quiz_generator_modular.formatters.quiz_formatter import format_char_counter, format_quiz_list

EXIT_COMMANDS = ('exit', 'quit', 'q')

def main():
    """Main function to run the quiz generator client"""
    configure_logging()
    print("クイズ生成ツール(β)")
    print("=" * 70)

    # Initialize all components
    print("\nInitializing components...")
    initialization_status = initialize_all()

    print("\nInitialization Status:")
    print("-" * 30)
    for component, status in initialization_status.items():
        status_icon = "✅" if status else "❌"
        print(f"{status_icon} {component}: {'Success' if status else 'Failed'}")

    run_interactive_mode(QuizFormController(config.quiz_api_url))

def handle_command(form: QuizFormController, user_input: str) -> bool:
    """Apply one line of input to the form; returns True when a generation was attempted"""
    if user_input.lower() == 'clear':
        form.clear()
        print("Cleared.")
        return False

    if user_input.lower().startswith('file '):
        if not form.load_file(user_input[5:].strip()):
            print(f"❌ {form.error}")
        else:
            print(format_char_counter(form.text, config.max_text_length))
            print("Loaded. Press Enter to generate.")
        return False

    # Empty input re-submits the current text
    if user_input:
        form.edit_text(user_input)
        print(format_char_counter(form.text, config.max_text_length))

    if form.can_generate:
        print("生成中...")
    form.generate()
    return True

def show_result(form: QuizFormController) -> None:
    if form.error:
        print(f"\n❌ {form.error}")
    elif form.quizzes:
        print("\n" + format_quiz_list(form.quizzes))

def run_interactive_mode(form: QuizFormController):
    """Interactive mode: type text, 'file <path>', 'clear' or 'exit'"""
    print(f"\n🔄 Interactive Mode - sending requests to {form.api_url}")
    print(f"Enter text (max {config.max_text_length} characters), 'file <path>' to load a .txt file,")
    print("'clear' to reset, 'exit' to quit")
    print("-" * 50)

    while True:
        try:
            user_input = input("\n> ").strip()

            if user_input.lower() in EXIT_COMMANDS:
                print("Goodbye!")
                break

            if handle_command(form, user_input):
                show_result(form)

        except (KeyboardInterrupt, EOFError):
            print("\n\nExiting...")
            break

if __name__ == "__main__":
    main()
