"""
Voice front end tests with a fake speech capability and a mocked runner.
"""

from unittest.mock import Mock

import pytest

from tomorrow_agents.config.settings import Settings
from tomorrow_agents.errors import VoiceUnavailableError
from tomorrow_agents.orchestrator.runner import AgentResult
from tomorrow_agents.orchestrator.voice import (
    VOICE_ERROR_MESSAGE,
    OpenAISpeech,
    VoicePreferences,
    VoiceTravelAgent,
    build_voice,
    handle_voice_command,
    recommendation_query,
)


class FakeSpeech:
    def __init__(self, transcript="I want to travel to Lisbon next week"):
        self.transcript = transcript
        self.spoken = []

    def speak(self, text, *, response_format="wav"):
        self.spoken.append((text, response_format))
        return f"{response_format}:{text}".encode()

    def listen(self, audio, *, filename="input.wav"):
        return self.transcript


@pytest.fixture
def runner(telemetry):
    runner = Mock()
    runner.context.telemetry = telemetry
    runner.generate.return_value = AgentResult(
        agent="tomorrow_travel_agent",
        response="**Lisbon** is sunny. Pack light!",
        user_id="u1",
        query_type="city_travel",
        tools_used=["weather"],
    )
    return runner


class TestRecommendationQuery:
    def test_full_preferences(self):
        query = recommendation_query(
            "Lisbon",
            VoicePreferences(
                budget="$1500",
                activities=["food", "surfing"],
                timeframe="next week",
                travel_style="adventure",
            ),
        )
        assert query == (
            "I want to visit Lisbon with a budget of $1500 and I'm interested in food, "
            "surfing for next week with a adventure travel style. What do you recommend?"
        )

    def test_location_only(self):
        assert recommendation_query("Oslo") == "I want to visit Oslo. What do you recommend?"


class TestVoiceTravelAgent:
    def test_text_to_voice_without_speech(self, runner):
        reply = VoiceTravelAgent(runner).handle_text_to_voice("Lisbon?", "u1")
        assert reply.response == "**Lisbon** is sunny. Pack light!"
        assert reply.speech_text == "Lisbon is sunny. ... Pack light!"
        assert reply.audio is None

    def test_text_to_voice_with_speech(self, runner):
        speech = FakeSpeech()
        reply = VoiceTravelAgent(runner, speech).handle_text_to_voice("Lisbon?", "u1")
        assert reply.audio == b"wav:Lisbon is sunny. ... Pack light!"

    def test_voice_to_text(self, runner):
        reply = VoiceTravelAgent(runner, FakeSpeech()).handle_voice_to_text(b"audio", "u1")
        assert reply.transcript == "I want to travel to Lisbon next week"
        assert reply.validation.is_valid is True
        runner.generate.assert_called_once_with("I want to travel to Lisbon next week", "u1")

    def test_voice_interaction_extracts_intent(self, runner, span_exporter):
        reply = VoiceTravelAgent(runner, FakeSpeech()).handle_voice_interaction(b"audio", "u1")
        assert reply.intent.timeframe == "next week"
        assert reply.audio.startswith(b"wav:")
        assert [span.name for span in span_exporter.get_finished_spans()] == [
            "voice_speech_to_speech"
        ]

    def test_audio_input_needs_speech(self, runner):
        with pytest.raises(VoiceUnavailableError):
            VoiceTravelAgent(runner).handle_voice_interaction(b"audio")
        runner.generate.assert_not_called()

    def test_generate_voice_recommendation(self, runner):
        VoiceTravelAgent(runner).generate_voice_recommendation(
            "Oslo", VoicePreferences(budget="cheap")
        )
        runner.generate.assert_called_once_with(
            "I want to visit Oslo with a budget of cheap. What do you recommend?", None
        )


class TestVoiceCommand:
    def test_success_speaks_mp3(self, runner):
        speech = FakeSpeech("move my blog to the top")
        result = handle_voice_command(runner, speech, b"audio", "u1")
        assert result.error is False
        assert result.tools_used == ["weather"]
        assert speech.spoken == [("**Lisbon** is sunny. Pack light!", "mp3")]

    def test_empty_transcript_returns_spoken_error(self, runner):
        speech = FakeSpeech("   ")
        result = handle_voice_command(runner, speech, b"audio")
        assert result.error is True
        assert result.response == VOICE_ERROR_MESSAGE
        assert speech.spoken == [(VOICE_ERROR_MESSAGE, "mp3")]
        runner.generate.assert_not_called()

    def test_runner_failure_returns_spoken_error(self, runner):
        runner.generate.side_effect = RuntimeError("boom")
        result = handle_voice_command(runner, FakeSpeech(), b"audio")
        assert result.error is True


class TestOpenAISpeech:
    def test_calls_speech_endpoints(self):
        client = Mock()
        client.audio.speech.create.return_value.content = b"mp3-bytes"
        client.audio.transcriptions.create.return_value.text = "hello"
        speech = OpenAISpeech(client, speaker="alloy")

        assert speech.speak("hi", response_format="mp3") == b"mp3-bytes"
        client.audio.speech.create.assert_called_once_with(
            model="tts-1", voice="alloy", input="hi", response_format="mp3"
        )
        assert speech.listen(b"raw", filename="clip.webm") == "hello"
        client.audio.transcriptions.create.assert_called_once_with(
            model="whisper-1", file=("clip.webm", b"raw")
        )

    def test_build_voice_needs_flag_and_key(self):
        assert build_voice(Settings(VOICE_ENABLED=False, OPENAI_API_KEY="sk-test")) is None
        assert build_voice(Settings(VOICE_ENABLED=True, OPENAI_API_KEY="")) is None
        assert isinstance(
            build_voice(Settings(VOICE_ENABLED=True, OPENAI_API_KEY="sk-test")), OpenAISpeech
        )
