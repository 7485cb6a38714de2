"""NiceGUI chat interface backed by a per-page ChatSession."""

import html
import re

from nicegui import ui

from geminichat.agent.config import ChatVariant, get_chat_config
from geminichat.agent.session import ChatSession
from geminichat.models.schemas import DeliveryStatus, Message

STATUS_GLYPHS = {
    DeliveryStatus.PENDING: "⏳",
    DeliveryStatus.DELIVERED: "✓✓",
    DeliveryStatus.FAILED: "❗",
}


def markdown_to_html(text: str) -> str:
    """Convert markdown to HTML for chat display.

    Supports: bold, italic, inline code, code blocks, lists.
    """
    text = html.escape(text, quote=False)

    # Code blocks (```code```)
    text = re.sub(
        r"```(\w*)\n?([\s\S]*?)```",
        r'<pre class="code-block"><code>\2</code></pre>',
        text,
    )

    # Inline code (`code`)
    text = re.sub(r"`([^`]+)`", r'<code class="inline-code">\1</code>', text)

    # Bold (**text**)
    text = re.sub(r"\*\*(.+?)\*\*", r"<strong>\1</strong>", text)

    # Italic (*text*)
    text = re.sub(r"\*([^*\n]+)\*", r"<em>\1</em>", text)

    lines = text.split("\n")
    result: list[str] = []
    open_tag: str | None = None
    for line in lines:
        stripped = line.strip()
        if re.match(r"^[-*]\s+", stripped):
            tag, item = "ul", re.sub(r"^[-*]\s+", "", stripped)
        elif re.match(r"^\d+\.\s+", stripped):
            tag, item = "ol", re.sub(r"^\d+\.\s+", "", stripped)
        else:
            tag, item = None, line
        if open_tag and tag != open_tag:
            result.append(f"</{open_tag}>")
            open_tag = None
        if tag and not open_tag:
            result.append(f"<{tag}>")
            open_tag = tag
        result.append(f"<li>{item}</li>" if tag else item)
    if open_tag:
        result.append(f"</{open_tag}>")

    # Line breaks (preserve newlines as <br>)
    return "\n".join(result).replace("\n", "<br>")


def plain_to_html(text: str) -> str:
    return html.escape(text, quote=False).replace("\n", "<br>")


CUSTOM_CSS = """
<style>
    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header-tutor { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); }
    .header-persona { background: #075e54; }

    .message-user {
        background: #dcf8c6;
        color: #111b21;
        border-radius: 18px 18px 4px 18px;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }

    .typing-dot {
        width: 8px; height: 8px;
        background: #667eea;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .message-status.failed { color: #dc2626; }
    .message-status.delivered { color: #34b7f1; }

    .code-block {
        background: #1f2937; color: #f3f4f6;
        border-radius: 8px; padding: 0.75rem; margin: 0.5rem 0;
        overflow-x: auto; font-size: 0.75rem;
    }
    .inline-code { background: #e5e7eb; color: #db2777; padding: 0 0.3rem; border-radius: 4px; }
    .message-assistant ul { list-style: disc inside; margin: 0.5rem 0; }
    .message-assistant ol { list-style: decimal inside; margin: 0.5rem 0; }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page. Each page load starts a fresh session."""
    ui.add_head_html(CUSTOM_CSS)
    session = ChatSession(get_chat_config())
    profile = session.config.profile
    is_persona = session.config.variant is ChatVariant.PERSONA

    scroll_area: ui.scroll_area
    messages_container: ui.column
    error_label: ui.label
    input_field: ui.input
    send_btn: ui.button

    def render_message(msg: Message) -> None:
        align = "justify-end" if msg.is_user else "justify-start"
        bubble = "message-user" if msg.is_user else "message-assistant"

        with ui.row().classes(f"w-full {align}"):
            with ui.column().classes(f"max-w-[75%] gap-1 px-4 py-2 {bubble}"):
                content = plain_to_html(msg.text) if msg.is_user else markdown_to_html(msg.text)
                ui.html(content, sanitize=False).classes("text-sm leading-relaxed")
                if profile.show_timestamps:
                    with ui.row().classes("self-end gap-1 items-center"):
                        ui.label(msg.timestamp or "").classes("text-[10px] text-gray-500")
                        if msg.is_user and msg.delivery_status:
                            ui.label(STATUS_GLYPHS[msg.delivery_status]).classes(
                                f"text-[10px] message-status {msg.delivery_status.value}"
                            )

    def render_typing_indicator() -> None:
        with ui.row().classes("w-full justify-start"):
            with ui.element("div").classes("message-assistant px-4 py-3"):
                with ui.row().classes("items-center gap-2"):
                    with ui.row().classes("gap-1"):
                        for _ in range(3):
                            ui.element("div").classes("typing-dot")
                    ui.label(profile.typing_label).classes("text-sm text-gray-500 italic")

    def refresh() -> None:
        messages_container.clear()
        with messages_container:
            for msg in session.messages:
                render_message(msg)
            if session.is_pending:
                render_typing_indicator()

        error_label.set_text(session.last_error or "")
        error_label.set_visibility(session.last_error is not None)
        input_field.set_enabled(not session.is_pending)
        send_btn.set_enabled(not session.is_pending)
        scroll_area.scroll_to(percent=1.0)

    async def send_message() -> None:
        text = input_field.value or ""
        if not text.strip() or session.is_pending:
            return
        input_field.value = ""
        await session.submit(text)
        if session.last_error and is_persona:
            ui.notify(session.last_error, type="negative")

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-3xl mx-auto app-container gap-0").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        header_css = "header-persona" if is_persona else "header-tutor"
        with ui.row().classes(f"w-full {header_css} px-5 py-4 items-center gap-3"):
            ui.icon("person" if is_persona else "school").classes("text-white text-3xl")
            ui.label(profile.title).classes("text-lg font-semibold text-white")

        with ui.scroll_area().classes("flex-grow w-full bg-gray-50") as scroll_area:
            messages_container = ui.column().classes("w-full gap-3 p-5")

        error_label = ui.label().classes("w-full px-5 py-2 text-sm text-red-600 bg-red-50")

        with ui.row().classes("w-full p-4 gap-3 items-center bg-white border-t"):
            input_field = (
                ui.input(placeholder=profile.placeholder)
                .props("outlined dense")
                .classes("flex-grow")
                .on("keydown.enter", send_message)
            )
            send_btn = ui.button(icon="send", on_click=send_message).props("round unelevated")

    session.on_change(refresh)
    refresh()
