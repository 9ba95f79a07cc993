# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Built-in beginner snippets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Sample:
    """Represent one catalogue snippet.

    Attributes:
        key: Short identifier used on the command line.
        title: Display title.
        description: One sentence describing what the snippet shows.
        code: Snippet source.
    """

    key: str
    title: str
    description: str
    code: str


SAMPLES: tuple[Sample, ...] = (
    Sample(
        key="hello-world",
        title="Hello World",
        description="The classic first program - displays a message",
        code='print("Hello, World!")\nprint("Welcome to Python!")',
    ),
    Sample(
        key="variables",
        title="Variables & Math",
        description="Store numbers and do calculations",
        code=(
            'name = "Alice"\n'
            "age = 25\n"
            "next_year = age + 1\n"
            'print("Hi", name)\n'
            "print(\"Next year you'll be\", next_year)"
        ),
    ),
    Sample(
        key="decisions",
        title="Making Decisions",
        description="Use if statements to make choices",
        code=(
            "temperature = 75\n"
            "if temperature > 70:\n"
            "    print(\"It's warm outside!\")\n"
            "else:\n"
            "    print(\"It's cool outside!\")"
        ),
    ),
    Sample(
        key="loops",
        title="Counting with Loops",
        description="Repeat actions multiple times",
        code=(
            "for i in range(5):\n"
            '    print("Count:", i)\n'
            "\n"
            'fruits = ["apple", "banana", "orange"]\n'
            "for fruit in fruits:\n"
            '    print("I like", fruit)'
        ),
    ),
    Sample(
        key="function",
        title="Simple Function",
        description="Create reusable code blocks",
        code=(
            "def greet(name):\n"
            '    return "Hello, " + name + "!"\n'
            "\n"
            'message = greet("Python")\n'
            "print(message)"
        ),
    ),
)


def get_sample(key: str) -> Sample:
    """Look up a sample by key.

    Raises:
        KeyError: If no sample uses ``key``.
    """
    for sample in SAMPLES:
        if sample.key == key:
            return sample
    raise KeyError(key)
