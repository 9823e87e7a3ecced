TEXTS_EN: dict[str, str] = {
    "msg.quiz.welcome": "Welcome to the Java Developer Quiz!",
    "msg.quiz.instructions": "Answer by typing the option number or letter (e.g., 1 or A).",
    "msg.quiz.separator": "-----------------------------------------------------------",
    "msg.quiz.question": "Q{number}. {prompt}",
    "msg.quiz.option": "  {letter}. {text}",
    "msg.quiz.answer.correct": "Correct! ✅",
    "msg.quiz.answer.wrong": "Wrong ❌   Correct answer: {letter}. {text}",
    "msg.quiz.rejected.empty": "Please enter an option (e.g., A or 1).",
    "msg.quiz.rejected.out_of_range_number": "Enter a number between 1 and {option_count}.",
    "msg.quiz.rejected.invalid_letter_or_format": (
        "Invalid input. Try again with option letter (A) or number (1)."
    ),
    "msg.quiz.finished": "Quiz finished!",
    "msg.quiz.score": "Your score: {score} out of {total}",
    "msg.quiz.percentage": "Percentage: {percentage:.2f}%",
    "msg.quiz.tier.perfect": "Excellent! You got all questions right. 🎉",
    "msg.quiz.tier.passed": "Good job! Keep practicing. 👍",
    "msg.quiz.tier.keep_learning": "Keep learning — practice makes perfect. 💪",
    "msg.quiz.aborted": "Input ended before the quiz was finished. No score recorded.",
    "msg.quiz.interrupted": "Interrupted.",
}
