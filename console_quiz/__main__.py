from console_quiz.main import main

main()
