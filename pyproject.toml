[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternkit"
version = "0.1.0"
description = "Small, runnable examples of classic design patterns: decorator, adapter, command, facade, observer and strategy."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "decorator",
    "adapter",
    "command",
    "facade",
    "observer",
    "strategy",
    "singleton",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternkit-decorator = "patternkit.decorator:main"
patternkit-adapter = "patternkit.adapter:main"
patternkit-command = "patternkit.command:main"
patternkit-facade = "patternkit.facade:main"
patternkit-youtube = "patternkit.youtube:main"
patternkit-notifications = "patternkit.notifications:main"

[tool.hatch.build.targets.wheel]
packages = ["patternkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
