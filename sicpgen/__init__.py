"""sicpgen -- scaffolds chapter/exercise directories for textbook exercises.

Given an identifier like ``"1-3"`` it creates
``<root>/chapter-1/exercise-3/`` with a rendered ``README.md`` and a Racket
``test.rkt`` stub.

Quick usage::

    from sicpgen import ExerciseGenerator, TemplateRenderer

    renderer = TemplateRenderer()
    renderer.load(["readme.md.tpl", "test.rkt.tpl"])
    exercise = ExerciseGenerator(renderer).generate("/tmp/sicp", "1-3")
"""

__version__ = "0.1.0"

from sicpgen.exercise import Exercise, locate
from sicpgen.generator import ExerciseGenerator, generate
from sicpgen.runner import run_tests
from sicpgen.templates import TemplateRenderer

__all__ = [
    "Exercise",
    "ExerciseGenerator",
    "TemplateRenderer",
    "generate",
    "locate",
    "run_tests",
]
