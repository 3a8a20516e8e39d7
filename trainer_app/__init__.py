"""SquareRootTrainer: a periodic square-root self-quiz for the desktop."""
