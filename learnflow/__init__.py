"""LearnFlow API: learning resources, gamified progress and AI study tools."""
