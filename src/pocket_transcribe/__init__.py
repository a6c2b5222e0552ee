"""pocket-transcribe — offline speech-recognition model manager and transcription runner."""

__version__ = '0.3.0'
