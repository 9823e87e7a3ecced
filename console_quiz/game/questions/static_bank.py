from __future__ import annotations

from console_quiz.game.questions.types import Question

_JAVA_BASICS_POOL: tuple[Question, ...] = (
    Question(
        question_id="java_001",
        prompt="What are Java loops?",
        options=(
            "A way to repeat code blocks multiple times",
            "A type of Java collection",
            "A method for sorting arrays",
            "A way to declare variables",
        ),
        correct_index=0,
    ),
    Question(
        question_id="java_002",
        prompt="What is the enhanced for-loop (for-each)?",
        options=(
            "A loop that iterates over elements of arrays/collections",
            "A loop that only executes once",
            "A loop that runs in parallel automatically",
            "A loop for reading files",
        ),
        correct_index=0,
    ),
    Question(
        question_id="java_003",
        prompt="How to handle multiple user inputs in Java console apps?",
        options=(
            "Use Scanner or BufferedReader and parse values sequentially",
            "Use JOptionPane only",
            "Create multiple main methods",
            "Use System.exit to stop inputs",
        ),
        correct_index=0,
    ),
    Question(
        question_id="java_004",
        prompt="How is a switch-case different from if-else?",
        options=(
            "switch-case branches on discrete values; if-else handles boolean expressions",
            "if-else is only for strings, switch-case is for numbers only",
            "switch-case is faster but can't use break",
            "They are identical in all cases",
        ),
        correct_index=0,
    ),
    Question(
        question_id="java_005",
        prompt="What are collections in Java?",
        options=(
            "Framework classes and interfaces for grouping objects (List, Set, Map)",
            "Primitive arrays only",
            "A way to write threads",
            "Java bytecode files",
        ),
        correct_index=0,
    ),
    Question(
        question_id="java_006",
        prompt="What is ArrayList?",
        options=(
            "A resizable array implementation of List in Java",
            "A fixed-size array",
            "A thread in Java",
            "A subclass of HashMap",
        ),
        correct_index=0,
    ),
    Question(
        question_id="java_007",
        prompt="How to iterate using an Iterator?",
        options=(
            "Obtain iterator() from collection and use hasNext()/next() in a loop",
            "Call forEach only",
            "Use indexing like array[i]",
            "Iterators cannot be used for Lists",
        ),
        correct_index=0,
    ),
    Question(
        question_id="java_008",
        prompt="What is a Map in Java?",
        options=(
            "An interface for key-value pairs (e.g., HashMap, TreeMap)",
            "A list of values",
            "A method of multithreading",
            "A type of exception",
        ),
        correct_index=0,
    ),
    Question(
        question_id="java_009",
        prompt="How to sort a list in Java?",
        options=(
            "Use Collections.sort(list) or list.sort(Comparator)",
            "Use Collections.shuffle(list)",
            "By converting to array and using System.arraycopy",
            "Sorting is not supported in Java collections",
        ),
        correct_index=0,
    ),
    Question(
        question_id="java_010",
        prompt="How to shuffle elements in a list?",
        options=(
            "Use Collections.shuffle(list, new Random())",
            "Call list.reverse() (which doesn't exist)",
            "Use Collections.sort with a random comparator",
            "Shuffling requires manual swapping only",
        ),
        correct_index=0,
    ),
)


def get_default_questions() -> list[Question]:
    return list(_JAVA_BASICS_POOL)
