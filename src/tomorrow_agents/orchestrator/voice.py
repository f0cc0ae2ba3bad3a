"""Speech in and out of the agents.

Speech goes through OpenAI's speech and transcription endpoints. The
capability is optional: text-to-voice calls still return the text answer
without audio when it is missing, while calls that start from audio need it.
"""

from __future__ import annotations

import logging
from typing import Protocol

from openai import OpenAI
from pydantic import BaseModel, Field

from tomorrow_agents.config.settings import Settings, get_settings
from tomorrow_agents.errors import VoiceUnavailableError, require_text
from tomorrow_agents.heuristics.intent import TravelIntent, extract_intent
from tomorrow_agents.heuristics.speech import (
    VoiceInputValidation,
    to_speech_text,
    validate_voice_input,
)
from tomorrow_agents.orchestrator.runner import AgentRunner

logger = logging.getLogger(__name__)

VOICE_ERROR_MESSAGE = "I'm sorry, I couldn't process that request. Please try again."


class SpeechCapability(Protocol):
    def speak(self, text: str, *, response_format: str = "wav") -> bytes:
        ...

    def listen(self, audio: bytes, *, filename: str = "input.wav") -> str:
        ...


class OpenAISpeech:
    def __init__(
        self,
        client: OpenAI,
        *,
        speaker: str = "nova",
        speech_model: str = "tts-1",
        listening_model: str = "whisper-1",
    ) -> None:
        self._client = client
        self.speaker = speaker
        self.speech_model = speech_model
        self.listening_model = listening_model

    def speak(self, text: str, *, response_format: str = "wav") -> bytes:
        result = self._client.audio.speech.create(
            model=self.speech_model,
            voice=self.speaker,
            input=text,
            response_format=response_format,
        )
        return result.content

    def listen(self, audio: bytes, *, filename: str = "input.wav") -> str:
        result = self._client.audio.transcriptions.create(
            model=self.listening_model, file=(filename, audio)
        )
        return result.text


def build_voice(settings: Settings | None = None) -> OpenAISpeech | None:
    settings = settings or get_settings()
    if not settings.voice_enabled:
        return None
    if not settings.openai_api_key:
        logger.warning("VOICE_ENABLED is set but OPENAI_API_KEY is empty; voice disabled")
        return None
    return OpenAISpeech(
        OpenAI(api_key=settings.openai_api_key),
        speaker=settings.voice_speaker,
        speech_model=settings.voice_speech_model,
        listening_model=settings.voice_listening_model,
    )


class VoicePreferences(BaseModel):
    budget: str | None = None
    activities: list[str] = Field(default_factory=list)
    timeframe: str | None = None
    travel_style: str | None = None


def recommendation_query(location: str, preferences: VoicePreferences | None = None) -> str:
    location = require_text(location, "location")
    preferences = preferences or VoicePreferences()
    query = f"I want to visit {location}"
    if preferences.budget:
        query += f" with a budget of {preferences.budget}"
    if preferences.activities:
        query += f" and I'm interested in {', '.join(preferences.activities)}"
    if preferences.timeframe:
        query += f" for {preferences.timeframe}"
    if preferences.travel_style:
        query += f" with a {preferences.travel_style} travel style"
    return query + ". What do you recommend?"


class VoiceReply(BaseModel):
    response: str
    speech_text: str = ""
    transcript: str | None = None
    validation: VoiceInputValidation | None = None
    intent: TravelIntent | None = None
    audio: bytes | None = None


class VoiceTravelAgent:
    """Voice front end for the travel agent runner."""

    def __init__(self, runner: AgentRunner, voice: SpeechCapability | None = None) -> None:
        self.runner = runner
        self.voice = voice

    @property
    def telemetry(self):
        return self.runner.context.telemetry

    def _require_voice(self) -> SpeechCapability:
        if self.voice is None:
            raise VoiceUnavailableError("Speech capability is not configured")
        return self.voice

    def _transcribe(self, audio: bytes) -> tuple[str, VoiceInputValidation]:
        transcript = self._require_voice().listen(audio)
        logger.info("User said: %r", transcript)
        validation = validate_voice_input(transcript)
        if not validation.is_valid:
            logger.warning("Voice input validation issues: %s", validation.issues)
        return transcript, validation

    def _speak(self, text: str) -> tuple[str, bytes | None]:
        speech_text = to_speech_text(text)
        if self.voice is None:
            return speech_text, None
        return speech_text, self.voice.speak(speech_text, response_format="wav")

    def handle_text_to_voice(self, text: str, user_id: str | None = None) -> VoiceReply:
        with self.telemetry.track_voice_interaction("text-to-speech", user_id):
            result = self.runner.generate(text, user_id)
            speech_text, audio = self._speak(result.response)
        return VoiceReply(response=result.response, speech_text=speech_text, audio=audio)

    def handle_voice_to_text(self, audio: bytes, user_id: str | None = None) -> VoiceReply:
        with self.telemetry.track_voice_interaction("speech-to-text", user_id):
            transcript, validation = self._transcribe(audio)
            result = self.runner.generate(transcript, user_id)
        return VoiceReply(
            response=result.response, transcript=transcript, validation=validation
        )

    def handle_voice_interaction(
        self, audio: bytes, user_id: str | None = None
    ) -> VoiceReply:
        with self.telemetry.track_voice_interaction("speech-to-speech", user_id):
            transcript, validation = self._transcribe(audio)
            intent = extract_intent(transcript)
            logger.info("Extracted travel intent: %s", intent.model_dump(exclude_none=True))
            result = self.runner.generate(transcript, user_id)
            speech_text, reply_audio = self._speak(result.response)
        return VoiceReply(
            response=result.response,
            speech_text=speech_text,
            transcript=transcript,
            validation=validation,
            intent=intent,
            audio=reply_audio,
        )

    def generate_voice_recommendation(
        self,
        location: str,
        preferences: VoicePreferences | None = None,
        user_id: str | None = None,
    ) -> VoiceReply:
        return self.handle_text_to_voice(recommendation_query(location, preferences), user_id)


class VoiceCommandResult(BaseModel):
    transcript: str
    response: str
    audio: bytes | None = None
    tools_used: list[str] = Field(default_factory=list)
    error: bool = False


def handle_voice_command(
    runner: AgentRunner,
    voice: SpeechCapability,
    audio: bytes,
    user_id: str | None = None,
) -> VoiceCommandResult:
    """Transcribe a spoken profile command, run it, and speak the answer back."""
    try:
        transcript = voice.listen(audio)
        if not transcript.strip():
            raise VoiceUnavailableError("Could not transcribe audio")
        logger.info("User said: %r", transcript)
        result = runner.generate(transcript, user_id)
        return VoiceCommandResult(
            transcript=transcript,
            response=result.response,
            audio=voice.speak(result.response, response_format="mp3"),
            tools_used=result.tools_used,
        )
    except Exception:  # noqa: BLE001
        logger.exception("Voice command failed")
        return VoiceCommandResult(
            transcript="",
            response=VOICE_ERROR_MESSAGE,
            audio=voice.speak(VOICE_ERROR_MESSAGE, response_format="mp3"),
            error=True,
        )
