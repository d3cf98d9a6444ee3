"""
Core functionality for the YouTube video digest application.

This package contains modules for acquiring transcripts (captions or audio
transcription), splitting them into chunks, generating summaries with the
supported LLM providers and orchestrating the streamed pipeline.
"""
