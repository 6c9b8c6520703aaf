"""
Streamlit UI — Customer Chat + Agent Timeline side-by-side.
"""

import time
from datetime import datetime

import httpx
import streamlit as st

from airline_support.config import API_BASE, SEAT_MAP_SENTINEL

SEAT_ROWS = range(1, 21)
SEAT_LETTERS = "ABCDEF"

st.set_page_config(page_title="Airline Customer Service", layout="wide")
st.title("✈️ Airline Customer Service Agents")


def send_message(message: str) -> None:
    """POST one message to /chat and fold the response into session state."""
    start_time = time.time()
    try:
        resp = httpx.post(
            f"{API_BASE}/chat",
            json={
                "message": message,
                "conversation_id": st.session_state.get("conversation_id"),
            },
            timeout=30.0,
        )
        resp.raise_for_status()
        data = resp.json()
    except Exception as e:
        st.error(f"Error: {e}")
        return

    st.session_state["conversation_id"] = data["conversation_id"]
    st.session_state["current_agent"] = data["current_agent"]
    st.session_state["context"] = data["context"]
    st.session_state["agents"] = data["agents"]
    for msg in data["messages"]:
        st.session_state["messages"].append(
            {"role": "assistant", "content": msg["content"], "agent": msg["agent"]}
        )
    st.session_state["traces"].append(
        {
            "timestamp": datetime.now().strftime("%H:%M:%S"),
            "agent": data["current_agent"],
            "events": data["events"],
            "guardrails": data["guardrails"],
            "elapsed_s": round(time.time() - start_time, 2),
        }
    )


def render_seat_map(key: str) -> None:
    """Interactive seat picker; clicking a seat sends "seat <id>"."""
    st.caption("Rows 4 and 16 are exit rows. Rows 5-8 are Economy Plus.")
    for row in SEAT_ROWS:
        cols = st.columns(len(SEAT_LETTERS))
        for col, letter in zip(cols, SEAT_LETTERS):
            seat = f"{row}{letter}"
            if col.button(seat, key=f"{key}-{seat}"):
                st.session_state["messages"].append({"role": "user", "content": f"seat {seat}"})
                send_message(f"seat {seat}")
                st.rerun()


# ── Session bootstrap ────────────────────────────────────────────────────────
st.session_state.setdefault("messages", [])
st.session_state.setdefault("traces", [])

if "conversation_id" not in st.session_state:
    send_message("")

# ── Sidebar: Context + Agents ────────────────────────────────────────────────
with st.sidebar:
    st.header("🧳 Conversation")
    if st.session_state.get("conversation_id"):
        st.info(f"Conversation: `{st.session_state['conversation_id']}`")
        st.metric("Active agent", st.session_state.get("current_agent", "—"))

    if st.button("🚀 Start New Conversation", type="primary"):
        for key in ("conversation_id", "current_agent", "context", "agents"):
            st.session_state.pop(key, None)
        st.session_state["messages"] = []
        st.session_state["traces"] = []
        st.rerun()

    st.subheader("Context")
    st.json(st.session_state.get("context", {}))

    st.subheader("Agents")
    for agent in st.session_state.get("agents", []):
        with st.expander(agent["name"], expanded=agent["name"] == st.session_state.get("current_agent")):
            st.markdown(agent["description"])
            if agent["tools"]:
                st.markdown("**Tools:** " + ", ".join(f"`{t}`" for t in agent["tools"]))
            st.markdown("**Handoffs:** " + ", ".join(agent["handoffs"]))
            st.markdown("**Guardrails:** " + ", ".join(agent["input_guardrails"]))


col_chat, col_trace = st.columns([1, 1])

# ── Chat Column ──────────────────────────────────────────────────────────────
with col_chat:
    st.subheader("💬 Customer Chat")

    for i, msg in enumerate(st.session_state["messages"]):
        if msg["role"] == "user":
            with st.chat_message("user", avatar="👤"):
                st.markdown(msg["content"])
            continue
        with st.chat_message("assistant", avatar="🤖"):
            st.caption(msg["agent"])
            if msg["content"] == SEAT_MAP_SENTINEL:
                render_seat_map(key=f"seatmap-{i}")
            else:
                st.markdown(msg["content"])

    customer_msg = st.chat_input("Type a message...")
    if customer_msg:
        st.session_state["messages"].append({"role": "user", "content": customer_msg})
        with st.spinner("Agents working..."):
            send_message(customer_msg)
        st.rerun()

# ── Trace Column ─────────────────────────────────────────────────────────────
with col_trace:
    st.subheader("📊 Agent Timeline")

    turns = [t for t in st.session_state["traces"] if t["events"] or t["guardrails"]]
    if not turns:
        st.info("Send a message to see handoffs, tool calls and guardrail checks.")

    for i, t in enumerate(turns):
        failed = [g for g in t["guardrails"] if not g["passed"]]
        with st.expander(
            f"Turn {i + 1} — {t['timestamp']} ({'🛑 REFUSED' if failed else '✅'})",
            expanded=(i == len(turns) - 1),
        ):
            c1, c2 = st.columns(2)
            c1.metric("Agent", t["agent"])
            c2.metric("Time", f"{t['elapsed_s']}s")

            for event in t["events"]:
                if event["type"] == "handoff":
                    st.markdown(f"🔀 **Handoff** {event['content']}")
                elif event["type"] == "tool_call":
                    args = event["metadata"].get("tool_args")
                    st.markdown(f"🛠️ **{event['agent']}** called `{event['content']}`")
                    if args:
                        st.json(args)
                else:
                    st.markdown("📝 **Context updated**")
                    st.json(event["metadata"].get("changes", {}))

            for check in t["guardrails"]:
                icon = "✅" if check["passed"] else "❌"
                st.markdown(f"{icon} {check['name']} {('— ' + check['reasoning']) if check['reasoning'] else ''}")
