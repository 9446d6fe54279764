"""QuizGen: randomized multiple-choice exams from a CSV question bank."""
