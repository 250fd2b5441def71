"""NiceGUI interface - thin visualization layer for the analysis form.

Responsibilities:
    - Prompt input and drag-and-drop file selection
    - Submit and clear controls, disabled while a request is in flight
    - Error alert and markdown rendering of the answer

Form and response state live in AnalyzeSession (state.py), one per page
visit. Network calls go through the analysis client.
"""
