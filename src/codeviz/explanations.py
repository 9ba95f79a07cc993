# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Plain-language explanation templates for beginner code."""

# Checked in order against lines that fall through every category matcher.
OTHER_LINE_TEMPLATES: tuple[tuple[str, str], ...] = (
    (
        "return",
        "This sends a result back from a function. It's like a function giving "
        "us an answer after we asked it to do something.",
    ),
    (
        "input(",
        "This asks the user to type something. The program waits for the user "
        "to enter text and press Enter.",
    ),
    (
        "len(",
        "This counts how many items are in something (like counting letters in "
        "a word or items in a list).",
    ),
    (
        "append(",
        "This adds a new item to the end of a list, like adding a new item to "
        "your shopping list.",
    ),
    (
        "+=",
        "This adds to an existing value. It's a shortcut for saying \"take "
        "what's already there and add more to it\".",
    ),
    (
        "==",
        "This compares two things to see if they're exactly the same. It asks "
        "\"are these equal?\"",
    ),
)


def with_line_number(line_number: int, sentence: str) -> str:
    """Prefix an explanation sentence with its source line number."""
    return f"Line {line_number}: {sentence}"


def explain_module_import(module_name: str) -> str:
    return (
        f"This brings in a tool called '{module_name}' that we can use in our "
        "program. Think of it like borrowing a calculator - we're borrowing "
        "pre-made code to help us."
    )


def explain_from_import(source: str, names: str) -> str:
    return (
        f"This takes specific tools ({names}) from a toolbox called '{source}'. "
        "It's like taking just a hammer from a full toolbox instead of carrying "
        "the whole thing."
    )


def explain_generic_import() -> str:
    return "This brings in tools from another program that we can use in our code."


def explain_function(name: str) -> str:
    return (
        f"This creates a new function (like a recipe) called '{name}'. We can use "
        "this recipe later by calling its name. Functions help us avoid writing "
        "the same code over and over."
    )


def explain_assignment(name: str, value: str) -> str:
    return (
        f"This creates a container called '{name}' and puts the value {value} "
        "inside it. Think of variables like labeled boxes where we store "
        "information to use later."
    )


def explain_condition(condition: str) -> str:
    return (
        f'This asks a yes/no question: "{condition}". If the answer is yes '
        "(true), the computer will do the next indented lines. If no (false), it "
        "skips them. It's like a fork in the road."
    )


def explain_for_each(target: str, iterable: str) -> str:
    return (
        "This starts a for loop that will repeat the indented code below. It "
        f"takes each item from {iterable} one by one and calls it '{target}'. "
        "It's like going through a list and doing something with each item."
    )


def explain_generic_for() -> str:
    return (
        "This starts a for loop that will repeat the indented code below "
        "multiple times."
    )


def explain_while() -> str:
    return (
        "This starts a while loop that keeps repeating the indented code below "
        "as long as a condition stays true. It's like saying \"keep doing this "
        'until I say stop".'
    )


def explain_print(argument: str) -> str:
    return (
        f"This displays {argument} on the screen. It's like the computer talking "
        "to us - showing us information or results."
    )


def explain_other(text: str) -> str:
    """Pick the canned sentence for a line no category claimed.

    Args:
        text: Trimmed source line.

    Returns:
        The first template whose marker occurs in ``text``, or a generic
        restatement of the line.
    """
    for marker, sentence in OTHER_LINE_TEMPLATES:
        if marker in text:
            return sentence
    return f"This line does: {text}. The computer follows this instruction step by step."
