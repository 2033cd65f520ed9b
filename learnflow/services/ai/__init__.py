"""AI generation of quizzes, learning paths, flashcards and summaries."""
