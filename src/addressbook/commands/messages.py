"""User-facing command messages and usage strings."""

from __future__ import annotations

MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_PERSONS_LISTED_OVERVIEW = "{count} persons listed!"
MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book."
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{usage}"

MESSAGE_ADD_SUCCESS = "New person added: {person}"
MESSAGE_EDIT_SUCCESS = "Edited Person: {person}"
MESSAGE_EDIT_NOT_EDITED = "At least one field to edit must be provided."
MESSAGE_REMARK_SUCCESS = "Remark updated: {person}"
MESSAGE_REMARK_NOT_ADDED = "Remark not added, remark requires text input."
MESSAGE_DELETE_SUCCESS = "Deleted Person: {person}"
MESSAGE_CLEAR_SUCCESS = "Address book has been cleared!"
MESSAGE_LIST_SUCCESS = "Listed all persons"
MESSAGE_SORT_SUCCESS = "Sorted all persons by name"
MESSAGE_UNDO_SUCCESS = "Undo success!"
MESSAGE_UNDO_FAILURE = "No more commands to undo!"
MESSAGE_REDO_SUCCESS = "Redo success!"
MESSAGE_REDO_FAILURE = "No more commands to redo!"
MESSAGE_HISTORY_SUCCESS = "Entered commands (from most recent to earliest):\n{entries}"
MESSAGE_HISTORY_EMPTY = "You have not yet entered any commands."
MESSAGE_EXIT = "Exiting Address Book as requested ..."

ADD_USAGE = (
    "add: Adds a person to the address book. "
    "Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS [r/REMARK] [t/TAG]...\n"
    "Example: add n/John Doe p/98765432 e/johnd@example.com "
    "a/311, Clementi Ave 2, #02-25 t/friends t/owesMoney"
)
EDIT_USAGE = (
    "edit: Edits the details of the person identified by the index number used in the "
    "displayed person list. Existing values will be overwritten by the input values.\n"
    "Parameters: INDEX (must be a positive integer) "
    "[n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] [r/REMARK] [t/TAG]...\n"
    "Example: edit 1 p/91234567 e/johndoe@example.com"
)
REMARK_USAGE = (
    "remark: Edits the remark of the person identified by the index number used in the "
    "displayed person list. Existing values will be overwritten by the input values.\n"
    "Parameters: INDEX (must be a positive integer) r/[TEXT]\n"
    "Example: remark 1 r/Likes to drink coffee."
)
DELETE_USAGE = (
    "delete: Deletes the person identified by the index number used in the displayed "
    "person list.\nParameters: INDEX (must be a positive integer)\nExample: delete 1"
)
FIND_USAGE = (
    "find: Finds all persons whose names contain any of the specified keywords "
    "(case-insensitive) and displays them as a list with index numbers.\n"
    "Parameters: KEYWORD [MORE_KEYWORDS]...\nExample: find alice bob charlie"
)
SORT_USAGE = "sort: Sorts all persons by name.\nExample: sort"
LIST_USAGE = "list: Lists all persons."
CLEAR_USAGE = "clear: Clears the address book."
UNDO_USAGE = "undo: Restores the address book to the state before the previous change."
REDO_USAGE = "redo: Reverses the most recent undo."
HISTORY_USAGE = "history: Lists all the commands entered, from most recent to earliest."
HELP_USAGE = "help: Shows program usage instructions.\nExample: help"
EXIT_USAGE = "exit: Exits the program."

ALL_USAGES = (
    ADD_USAGE,
    EDIT_USAGE,
    REMARK_USAGE,
    DELETE_USAGE,
    FIND_USAGE,
    SORT_USAGE,
    LIST_USAGE,
    CLEAR_USAGE,
    UNDO_USAGE,
    REDO_USAGE,
    HISTORY_USAGE,
    HELP_USAGE,
    EXIT_USAGE,
)
