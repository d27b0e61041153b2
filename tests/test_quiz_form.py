import io
import json
import httpx
import pytest
from quiz_generator_modular.client.quiz_form import (
    API_ERROR_FALLBACK,
    EMPTY_TEXT_ERROR,
    FILE_READ_ERROR,
    QuizFormController,
)
from quiz_generator_modular.main import handle_command

API_URL = "http://testserver/api/quiz"

class ApiStub:
    def __init__(self, status_code=200, body=None, text=None, error=None):
        self.status_code = status_code
        self.body = body if body is not None else {"quizzes": [{"question": "Q", "answer": "A"}]}
        self.text = text
        self.error = error
        self.requests = []
        self.loading_seen = []

    def handler(self, request):
        self.requests.append(request)
        if self.error:
            raise self.error
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.body)

@pytest.fixture
def stub():
    return ApiStub()

@pytest.fixture
def form(stub):
    controller = QuizFormController(API_URL)

    def handler(request):
        stub.loading_seen.append(controller.loading)
        return stub.handler(request)

    controller.transport = httpx.MockTransport(handler)
    return controller

def test_edit_text_caps_length(form):
    form.edit_text("a" * 1200)
    assert form.text == "a" * 1000

def test_load_file_from_path(form, tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("b" * 1500, encoding="utf-8")

    assert form.load_file(path)
    assert form.text == "b" * 1000

def test_load_file_from_binary_stream(form):
    assert form.load_file(io.BytesIO("光合成について".encode("utf-8")))
    assert form.text == "光合成について"

def test_failed_load_keeps_previous_text(form, tmp_path):
    form.edit_text("previous")

    assert not form.load_file(tmp_path / "missing.txt")
    assert form.text == "previous"
    assert form.error == FILE_READ_ERROR

def test_undecodable_file_is_a_read_failure(form):
    assert not form.load_file(io.BytesIO(b"\xff\xfe\xfa"))
    assert form.error == FILE_READ_ERROR

def test_generate_with_blank_text_sends_nothing(form, stub):
    form.edit_text("   ")

    assert not form.can_generate
    form.generate()

    assert form.error == EMPTY_TEXT_ERROR
    assert stub.requests == []

def test_generate_posts_trimmed_text(form, stub):
    form.edit_text("  本文  ")

    quizzes = form.generate()

    assert json.loads(stub.requests[0].content) == {"text": "本文"}
    assert quizzes == [{"question": "Q", "answer": "A"}]
    assert form.quizzes == quizzes
    assert form.error is None
    assert stub.loading_seen == [True]
    assert form.loading is False

def test_generate_keeps_first_five(form, stub):
    stub.body = {"quizzes": [{"question": f"Q{i}", "answer": "A"} for i in range(7)]}
    form.edit_text("本文")

    assert len(form.generate()) == 5

def test_missing_quizzes_array_gives_empty_list(form, stub):
    stub.body = {"quizzes": "oops"}
    form.edit_text("本文")

    assert form.generate() == []
    assert form.error is None

def test_server_error_message_is_shown(form, stub):
    stub.status_code, stub.body = 500, {"error": "No quizzes generated", "raw": "..."}
    form.quizzes = [{"question": "old", "answer": "old"}]
    form.edit_text("本文")

    form.generate()

    assert form.error == "No quizzes generated"
    assert form.quizzes == []
    assert form.loading is False

def test_server_error_without_message_uses_fallback(form, stub):
    stub.status_code, stub.body = 502, {}
    form.edit_text("本文")

    form.generate()

    assert form.error == API_ERROR_FALLBACK

def test_network_failure_clears_loading(form, stub):
    stub.error = httpx.ConnectError("connection refused")
    form.edit_text("本文")

    form.generate()

    assert form.error == "connection refused"
    assert form.loading is False
    assert len(stub.requests) == 1

def test_non_json_response_is_reported(form, stub):
    stub.text = "<html>oops</html>"
    form.edit_text("本文")

    form.generate()

    assert form.error
    assert form.loading is False

def test_clear_resets_everything(form):
    form.edit_text("本文")
    form.generate()
    form.error = "x"

    form.clear()

    assert (form.text, form.quizzes, form.error) == ("", [], None)

def test_terminal_commands_drive_the_form(form, stub, tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("地球は太陽の周りを回る。", encoding="utf-8")

    assert handle_command(form, f"file {path}") is False
    assert stub.requests == []

    assert handle_command(form, "") is True
    assert json.loads(stub.requests[0].content) == {"text": "地球は太陽の周りを回る。"}

    assert handle_command(form, "clear") is False
    assert form.text == ""
    assert "Cleared." in capsys.readouterr().out

def test_closed_stream_is_a_read_failure(form):
    form.edit_text("previous")
    stream = io.BytesIO(b"abc")
    stream.close()

    assert not form.load_file(stream)
    assert form.error == FILE_READ_ERROR
    assert form.text == "previous"

def test_object_without_read_is_a_read_failure(form):
    assert not form.load_file(object())
    assert form.error == FILE_READ_ERROR
