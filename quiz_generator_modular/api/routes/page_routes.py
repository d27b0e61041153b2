# api/routes/page_routes.py
from fastapi import APIRouter
from fastapi.responses import HTMLResponse
from quiz_generator_modular.config import config

router = APIRouter()

# Browser form; the script keeps the same state as client.quiz_form.QuizFormController
QUIZ_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="ja">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>クイズ生成ツール(β)</title>
    <style>
        body { font-family: sans-serif; margin: 0; padding: 2.5rem; background: #f9fafb; color: #111827; }
        main { max-width: 48rem; margin: 0 auto; }
        label { display: block; font-size: 0.875rem; font-weight: 500; color: #374151; margin-bottom: 0.5rem; }
        textarea { width: 100%; box-sizing: border-box; padding: 0.75rem; border: 1px solid #d1d5db; border-radius: 0.375rem; }
        section { margin-top: 1.5rem; }
        .meta { display: flex; justify-content: space-between; font-size: 0.75rem; color: #6b7280; }
        .buttons { display: flex; gap: 0.75rem; margin-top: 1.5rem; }
        button { padding: 0.5rem 1rem; border: 0; border-radius: 0.375rem; color: #fff; background: #2563eb; cursor: pointer; }
        button:disabled { opacity: 0.5; cursor: not-allowed; }
        button.secondary { background: #6b7280; }
        .error { margin-top: 1.5rem; padding: 0.75rem; border: 1px solid #fecaca; background: #fef2f2; color: #b91c1c; border-radius: 0.375rem; }
        ol { padding-left: 0; list-style: none; }
        li { margin-bottom: 1rem; padding: 1rem; border: 1px solid #e5e7eb; border-radius: 0.5rem; background: #fff; }
        .answer-label { padding: 0.125rem 0.5rem; background: #f0fdf4; color: #15803d; font-weight: 600; border-radius: 0.25rem; }
        [hidden] { display: none !important; }
    </style>
</head>
<body>
<main>
    <header>
        <h1>クイズ生成ツール(β)</h1>
        <p>テキストファイルをアップロードするか、下の入力欄に最大__MAX_LEN__文字まで入力してください。ボタンを押すと本文から5問のクイズを生成します。</p>
    </header>

    <section>
        <label for="quiz-file">テキストファイルのアップロード (.txt)</label>
        <input id="quiz-file" type="file" accept=".txt,text/plain">
    </section>

    <section>
        <label for="quiz-text">入力欄（最大__MAX_LEN__文字）</label>
        <textarea id="quiz-text" rows="10" maxlength="__MAX_LEN__"
                  placeholder="ここに本文を入力するか、ファイルをアップロードしてください。"></textarea>
        <div class="meta">
            <span id="char-count">文字数: 0 / __MAX_LEN__</span>
            <span id="loading-label" hidden>生成中...</span>
        </div>
    </section>

    <div class="buttons">
        <button id="generate-button" disabled>クイズを作成</button>
        <button id="clear-button" class="secondary">クリア</button>
    </div>

    <div id="error-box" class="error" hidden></div>

    <section id="results" hidden>
        <h2>生成結果（5問まで）</h2>
        <ol id="quiz-list"></ol>
    </section>
</main>
<script>
    const MAX_LEN = __MAX_LEN__;
    const MAX_QUIZZES = __MAX_QUIZZES__;
    const state = { text: "", quizzes: [], loading: false, error: null };

    const fileInput = document.getElementById("quiz-file");
    const textArea = document.getElementById("quiz-text");
    const charCount = document.getElementById("char-count");
    const loadingLabel = document.getElementById("loading-label");
    const generateButton = document.getElementById("generate-button");
    const clearButton = document.getElementById("clear-button");
    const errorBox = document.getElementById("error-box");
    const results = document.getElementById("results");
    const quizList = document.getElementById("quiz-list");

    function setState(patch) {
        Object.assign(state, patch);
        render();
    }

    function render() {
        if (textArea.value !== state.text) textArea.value = state.text;
        charCount.textContent = `文字数: ${state.text.length} / ${MAX_LEN}`;
        loadingLabel.hidden = !state.loading;
        const disabled = state.loading || state.text.trim().length === 0;
        generateButton.disabled = disabled;
        generateButton.setAttribute("aria-disabled", String(disabled));
        generateButton.textContent = state.loading ? "生成中..." : "クイズを作成";
        errorBox.hidden = !state.error;
        errorBox.textContent = state.error || "";
        results.hidden = state.quizzes.length === 0;
        quizList.replaceChildren(...state.quizzes.map((quiz, idx) => {
            const item = document.createElement("li");
            const question = document.createElement("p");
            question.textContent = `Q${idx + 1}. ${quiz.question}`;
            const answer = document.createElement("p");
            const label = document.createElement("span");
            label.className = "answer-label";
            label.textContent = "答え";
            answer.append(label, " ", quiz.answer);
            item.append(question, answer);
            return item;
        }));
    }

    fileInput.addEventListener("change", async (event) => {
        const file = event.target.files && event.target.files[0];
        if (!file) return;
        try {
            const content = await file.text();
            setState({ text: content.slice(0, MAX_LEN) });
        } catch (err) {
            setState({ error: "ファイルの読み込みに失敗しました。" });
        }
    });

    textArea.addEventListener("input", (event) => {
        setState({ text: event.target.value.slice(0, MAX_LEN) });
    });

    generateButton.addEventListener("click", async () => {
        const payload = state.text.trim().slice(0, MAX_LEN);
        if (!payload) {
            setState({ error: "テキストが空です。入力またはファイルをアップロードしてください。" });
            return;
        }
        setState({ loading: true, error: null, quizzes: [] });
        try {
            const res = await fetch("/api/quiz", {
                method: "POST",
                headers: { "Content-Type": "application/json" },
                body: JSON.stringify({ text: payload }),
            });
            const data = await res.json();
            if (!res.ok) {
                throw new Error((data && data.error) || "APIエラーが発生しました");
            }
            const list = Array.isArray(data && data.quizzes) ? data.quizzes : [];
            setState({ quizzes: list.slice(0, MAX_QUIZZES) });
        } catch (err) {
            setState({ error: (err && err.message) || "不明なエラーが発生しました" });
        } finally {
            setState({ loading: false });
        }
    });

    clearButton.addEventListener("click", () => {
        setState({ text: "", quizzes: [], error: null });
    });

    render();
</script>
</body>
</html>
"""

def render_quiz_page() -> str:
    return (
        QUIZ_PAGE_TEMPLATE
        .replace("__MAX_LEN__", str(config.max_text_length))
        .replace("__MAX_QUIZZES__", str(config.max_quizzes))
    )

@router.get("/quiz", response_class=HTMLResponse)
def quiz_page():
    """Serve the quiz generation form"""
    return HTMLResponse(content=render_quiz_page())
