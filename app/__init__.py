"""IGC Fitness backend application package."""
