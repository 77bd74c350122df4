from properties.generators import (
    GeneratorConfig,
    GeneratorMode,
    SequenceGenerator,
    RepetitiveSequenceGenerator,
    EdgeCaseGenerator,
    CaseGenerator,
    LCSCase,
    generate_random_pairs,
    generate_cases
)


__all__ = [
    "GeneratorConfig",
    "GeneratorMode",
    "SequenceGenerator",
    "RepetitiveSequenceGenerator",
    "EdgeCaseGenerator",
    "CaseGenerator",
    "LCSCase",
    "generate_random_pairs",
    "generate_cases"
]
