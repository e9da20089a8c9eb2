"""
Build tooling for the lessons under src/.

- literate: renders one literate lesson script to a Markdown page
- compile: walks src/lesson_N/ and renders every lesson into compiled/
"""
