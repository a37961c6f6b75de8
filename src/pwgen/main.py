from __future__ import annotations

import sys

from .characters import POOL_ORDER
from .clipboard import copy_text
from .config import LOG_LEVEL, MAX_LENGTH, MIN_LENGTH
from .logging_config import setup_logging
from .notifier import Notification
from .session import GeneratorSession

OPTION_LABELS = {
    'upper': 'Uppercase letters',
    'lower': 'Lowercase letters',
    'numbers': 'Numbers',
    'symbols': 'Symbols',
}


def print_notification(notification: Notification) -> None:
    """Print a notification with a success or error marker."""
    marker = '[!]' if notification.is_error else '[+]'
    print(f'{marker} {notification.message}\n')


def action_generate_password(session: GeneratorSession) -> None:
    """Generate a password and display it to the user."""
    password = session.generate()

    if password is not None:
        print('Generated password:', password, '\n')


def action_copy_password(session: GeneratorSession) -> None:
    """Copy the last generated password to the clipboard."""
    session.copy_to_clipboard()


def action_set_length(session: GeneratorSession) -> None:
    """Prompt for a new password length."""
    length_input = input(f'Length ({MIN_LENGTH}-{MAX_LENGTH}, current {session.length}): ').strip()

    if not length_input.isdigit():
        print('[!] Length must be a whole number.\n')
        return

    try:
        session.length = int(length_input)
    except ValueError as exc:
        print(f'[!] {exc}\n')
        return

    print(f'[+] Length set to {session.length}.\n')


def action_toggle_option(session: GeneratorSession, name: str) -> None:
    """Flip one character class on or off."""
    enabled = session.toggle_option(name)
    state = 'on' if enabled else 'off'
    print(f'[*] {OPTION_LABELS[name]}: {state}\n')


def action_show_settings(session: GeneratorSession) -> None:
    """Print the current length and character classes."""
    print('Length:', session.length)
    for name in POOL_ORDER:
        state = 'on' if session.get_option(name) else 'off'
        print(f' - {OPTION_LABELS[name]}: {state}')
    print()


def show_menu() -> str:
    """Print the main menu and return the user's choice."""
    print('===== Password Generator =====')
    print('1) Generate password')
    print('2) Copy password to clipboard')
    print('3) Set length')
    print('4) Toggle uppercase letters')
    print('5) Toggle lowercase letters')
    print('6) Toggle numbers')
    print('7) Toggle symbols')
    print('8) Show settings')
    print('9) Quit')
    return input('Select an option: ').strip()


def run(session: GeneratorSession) -> None:
    """Run the menu loop until the user quits."""
    toggles = {'4': 'upper', '5': 'lower', '6': 'numbers', '7': 'symbols'}

    while True:
        choice = show_menu()
        print()

        if choice == '1':
            action_generate_password(session)
        elif choice == '2':
            action_copy_password(session)
        elif choice == '3':
            action_set_length(session)
        elif choice in toggles:
            action_toggle_option(session, toggles[choice])
        elif choice == '8':
            action_show_settings(session)
        elif choice == '9':
            print('Goodbye.')
            return
        else:
            print('Invalid selection.\n')


def main() -> None:
    """Main entry point for the CLI."""
    setup_logging(LOG_LEVEL)
    session = GeneratorSession(clipboard=copy_text, notify=print_notification)

    try:
        run(session)
    except (KeyboardInterrupt, EOFError):
        print('\nGoodbye.')
        sys.exit(0)


if __name__ == '__main__':
    main()
