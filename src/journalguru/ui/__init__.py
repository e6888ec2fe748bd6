"""Gradio form for Journal Guru."""
