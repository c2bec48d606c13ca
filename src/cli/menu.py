"""Text menu over ContactService. Input and output are injectable for tests."""

from collections.abc import Callable
from enum import IntEnum

from addrbook.application import (
    ContactCreated,
    ContactDeleted,
    ContactNotFound,
    ContactService,
    ContactSummary,
    ContactUpdated,
    FileUnavailable,
    Invalid,
    Loaded,
    MalformedHeader,
    NoChanges,
    RetryController,
    Saved,
)
from addrbook.domain import SearchField, ValidationStatus
from addrbook.infrastructure import format_phone

Reader = Callable[[str], str]
Writer = Callable[[str], None]

RULE = "-" * 80


class MenuOption(IntEnum):
    CREATE = 1
    SEARCH = 2
    EDIT = 3
    DELETE = 4
    LIST = 5
    SAVE = 6
    EXIT = 7


class SearchOption(IntEnum):
    NAME = 1
    PHONE = 2
    EMAIL = 3
    CANCEL = 4


class EditOption(IntEnum):
    NAME = 1
    PHONE = 2
    EMAIL = 3
    SAVE = 4
    CANCEL = 5


_SEARCH_FIELDS = {
    SearchOption.NAME: SearchField.NAME,
    SearchOption.PHONE: SearchField.PHONE,
    SearchOption.EMAIL: SearchField.EMAIL,
}

_EDIT_FIELDS = {
    EditOption.NAME: SearchField.NAME,
    EditOption.PHONE: SearchField.PHONE,
    EditOption.EMAIL: SearchField.EMAIL,
}

# Returned by a guarded step when the user picks "cancel" from a sub-menu.
_CANCELLED = object()


def parse_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


class MenuDriver:
    """Sequences prompts and calls into the service. Owns no contact state."""

    def __init__(
        self,
        service: ContactService,
        *,
        read: Reader = input,
        write: Writer = print,
        phone_region: str | None = "US",
    ) -> None:
        self._service = service
        self._read = read
        self._write = write
        self._phone_region = phone_region

    # --- Main loop ---

    def run(self) -> None:
        self._write("Address book ready.")
        self.load()
        while True:
            try:
                choice = self._read_int(self._main_menu())
            except EOFError:
                self._write("\nGoodbye.")
                return
            try:
                if choice == MenuOption.EXIT:
                    self._write("Goodbye.")
                    return
                self._dispatch(choice)
            except EOFError:
                self._write("\nGoodbye.")
                return

    def _dispatch(self, choice: int | None) -> None:
        if choice == MenuOption.CREATE:
            self.create()
        elif choice == MenuOption.SEARCH:
            self.search()
        elif choice == MenuOption.EDIT:
            self.edit()
        elif choice == MenuOption.DELETE:
            self.delete()
        elif choice == MenuOption.LIST:
            self.list_contacts()
        elif choice == MenuOption.SAVE:
            self.save()
        else:
            self._write("That isn't a menu option. Pick a number from the menu.")

    def _main_menu(self) -> str:
        lines = [
            "",
            "MAIN MENU",
            f"  {MenuOption.CREATE.value}. Create contact",
            f"  {MenuOption.SEARCH.value}. Search contact",
            f"  {MenuOption.EDIT.value}. Edit contact",
            f"  {MenuOption.DELETE.value}. Delete contact",
            f"  {MenuOption.LIST.value}. List all contacts",
            f"  {MenuOption.SAVE.value}. Save contacts to file",
            f"  {MenuOption.EXIT.value}. Exit",
            RULE,
        ]
        self._write("\n".join(lines))
        return "What would you like to do? "

    # --- Operations ---

    def create(self) -> ContactCreated | None:
        self._write("\nCREATE CONTACT")
        name = self._collect("Enter name: ", self._service.check_name)
        if name is None:
            return self._abandoned("Contact not created.")
        phone = self._collect("Enter phone number: ", self._service.check_phone)
        if phone is None:
            return self._abandoned("Contact not created.")
        email = self._collect("Enter email: ", self._service.check_email)
        if email is None:
            return self._abandoned("Contact not created.")

        result = self._service.create_contact(name, phone, email)
        if isinstance(result, Invalid):
            self._write(result.reason)
            return None
        self._write(f"{result.name} added with id {result.contact_id}.")
        return result

    def search(self) -> ContactSummary | None:
        """Ask for a criterion and query; return the one contact the user settles on."""
        self._write("\nSEARCH CONTACT")
        if self._service.count() == 0:
            self._write("The address book is empty.")
            return None
        found = self._retry().guard(self._search_step)
        if found is None or found is _CANCELLED:
            self._write("Search cancelled.")
            return None
        return found

    def edit(self) -> ContactUpdated | NoChanges | None:
        self._write("\nEDIT CONTACT")
        if self._service.count() == 0:
            self._write("There is nothing to edit; the address book is empty.")
            return None
        target = self.search()
        if target is None:
            return None
        session = self._service.begin_edit(target.contact_id)
        if isinstance(session, ContactNotFound):
            self._write("That contact no longer exists.")
            return None

        while True:
            choice = self._read_int(self._edit_menu())
            if choice in _EDIT_FIELDS:
                field = _EDIT_FIELDS[EditOption(choice)]
                value = self._collect(
                    f"Enter new {field.value}: ",
                    lambda v, f=field: session.set_field(f, v),
                )
                if value is None:
                    session.cancel()
                    return self._abandoned("Edit cancelled; no changes made.")
            elif choice == EditOption.SAVE:
                result = session.save()
                if isinstance(result, ContactUpdated):
                    self._write(f"Saved changes to {result.name}.")
                    return result
                if isinstance(result, NoChanges):
                    self._write("Nothing changed.")
                    return result
                self._write("That contact no longer exists.")
                return None
            elif choice == EditOption.CANCEL:
                session.cancel()
                return self._abandoned("Edit cancelled; no changes made.")
            else:
                self._write("That isn't an option. Try again.")
            self._write(self._format_details(session.staged))

    def delete(self) -> ContactDeleted | None:
        self._write("\nDELETE CONTACT")
        if self._service.count() == 0:
            self._write("The address book is empty. Nothing to delete.")
            return None
        target = self.search()
        if target is None:
            return None
        self._write("Delete this contact?")
        self._write(self._format_details(target))

        def confirm() -> bool | None:
            answer = self._read("Are you sure? (y/n): ").strip().lower()
            if answer == "y":
                return True
            if answer == "n":
                return False
            self._write("Please type 'y' or 'n'.")
            return None

        confirmed = self._retry().guard(confirm)
        if confirmed is None:
            return self._abandoned("Left everything as it was.")
        if not confirmed:
            self._write("Kept the contact.")
            return None
        result = self._service.delete(target.contact_id)
        if isinstance(result, ContactNotFound):
            self._write("That contact no longer exists.")
            return None
        self._write(f"Deleted {result.name}.")
        return result

    def list_contacts(self) -> list[ContactSummary]:
        summaries = self._service.list_contacts()
        self._write("\nCONTACT LIST")
        if not summaries:
            self._write("The address book is empty.")
            return summaries
        self._write(f"| {'ID':<4} | {'Name':<20} | {'Phone':<15} | {'Email':<25} |")
        self._write(RULE)
        for s in summaries:
            phone = format_phone(s.phone, self._phone_region)
            self._write(f"| {s.contact_id:<4} | {s.name:<20} | {phone:<15} | {s.email:<25} |")
        self._write(RULE)
        self._write(f"Total contacts: {len(summaries)}")
        return summaries

    def save(self) -> Saved | FileUnavailable:
        result = self._service.save()
        if isinstance(result, Saved):
            self._write(f"Saved {result.count} contact(s) to {result.path}.")
        else:
            self._write(f"Couldn't save to {result.path}: {result.reason}")
        return result

    def load(self) -> Loaded | FileUnavailable | MalformedHeader:
        result = self._service.load()
        if isinstance(result, Loaded):
            self._write(f"Loaded {result.count} contact(s) from {result.path}.")
            for record in result.skipped:
                self._write(f"Skipped unreadable line {record.line_number}.")
        elif isinstance(result, MalformedHeader):
            self._write(f"Couldn't read the contact count in {result.path}; nothing loaded.")
        else:
            self._write(f"No saved contacts found at {result.path}; starting empty.")
        return result

    # --- Helpers ---

    def _search_step(self) -> ContactSummary | object | None:
        lines = [
            "",
            f"  {SearchOption.NAME.value}) Search by name",
            f"  {SearchOption.PHONE.value}) Search by phone",
            f"  {SearchOption.EMAIL.value}) Search by email",
            f"  {SearchOption.CANCEL.value}) Cancel",
        ]
        self._write("\n".join(lines))
        choice = self._read_int("How would you like to search? ")
        if choice == SearchOption.CANCEL:
            return _CANCELLED
        if choice not in _SEARCH_FIELDS:
            self._write("That isn't one of the options.")
            return None
        field = _SEARCH_FIELDS[SearchOption(choice)]
        query = self._read(f"Enter {field.value} to look for: ")
        matches = self._service.search(field, query)
        if not matches:
            self._write(f'No contact matches "{query}".')
            return None
        if len(matches) == 1:
            self._write(self._format_details(matches[0]))
            return matches[0]

        self._write(f"Found {len(matches)} matches:")
        self._write(f" {'No.':<3} | {'ID':<4} | {'Name':<20} | {'Phone':<15} | {'Email':<30}")
        self._write(RULE)
        for i, s in enumerate(matches, start=1):
            self._write(f" {i:<3} | {s.contact_id:<4} | {s.name:<20} | {s.phone:<15} | {s.email:<30}")
        self._write(RULE)
        selection = self._read_int("Which one? ")
        if selection is None or not 1 <= selection <= len(matches):
            self._write("That isn't a valid choice.")
            return None
        selected = matches[selection - 1]
        self._write(self._format_details(selected))
        return selected

    def _collect(
        self, prompt: str, check: Callable[[str], ValidationStatus]
    ) -> str | None:
        """Prompt until check passes, under a fresh retry controller. None means cancelled."""

        def step() -> str | None:
            value = self._read(prompt)
            status = check(value)
            if status is ValidationStatus.VALID:
                return value
            self._write(status.message)
            return None

        return self._retry().guard(step)

    def _retry(self) -> RetryController:
        return RetryController(
            self._ask_retry,
            on_unrecognized=lambda _answer: self._write("Please choose 1 or 2."),
        )

    def _ask_retry(self, attempts: int, max_attempts: int) -> str:
        self._write(f"[ ATTEMPT {attempts} of {max_attempts} ]")
        self._write("1. Try again\n2. Cancel")
        return self._read("Choose: ")

    def _read_int(self, prompt: str) -> int | None:
        return parse_int(self._read(prompt))

    def _edit_menu(self) -> str:
        lines = [
            "",
            "EDIT MENU",
            f"  {EditOption.NAME.value}. Edit name",
            f"  {EditOption.PHONE.value}. Edit phone",
            f"  {EditOption.EMAIL.value}. Edit email",
            f"  {EditOption.SAVE.value}. Save changes",
            f"  {EditOption.CANCEL.value}. Cancel edit",
        ]
        self._write("\n".join(lines))
        return "What would you like to change? "

    def _format_details(self, s: ContactSummary) -> str:
        return "\n".join(
            [
                f"ID    : {s.contact_id}",
                f"Name  : {s.name}",
                f"Phone : {format_phone(s.phone, self._phone_region)}",
                f"Email : {s.email}",
            ]
        )

    def _abandoned(self, message: str) -> None:
        self._write(message)
        return None
