# =============================================================================
# main.py  -  Console front end for the Optimizely CMS Content Assistant
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# STARTUP:
#   The CMS connection is fixed for the whole session.  CMS_URL and
#   CMS_AUTH_TOKEN are read from the environment (.env included); anything
#   missing is asked for once on the console.  The token prompt does not
#   echo, and a blank token means anonymous access.
#
# EACH TURN:
#   The question goes to the agent; every tool call is echoed as
#   "tool [operation](args)" with the token masked, then the answer is
#   printed.  Type 'quit' to exit.
# =============================================================================

import asyncio
import os
from getpass import getpass

from dotenv import load_dotenv

# LiteLlm reads provider keys (OPENROUTER_API_KEY, ...) when the agent is
# created, so .env must be loaded first.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from cms_agent.cms_agent import connection_state, create_agent, describe_tool_call

APP_NAME = "cms_content_assistant"
USER_ID = "console_user"
EXIT_WORDS = ("quit", "exit", "q")


def read_connection() -> dict[str, str]:
    """Collect the CMS URL and bearer token, preferring the environment."""
    cms_url = os.environ.get("CMS_URL") or input("CMS URL: ")
    auth_token = os.environ.get("CMS_AUTH_TOKEN")
    if auth_token is None:
        auth_token = getpass("Bearer token (blank for anonymous): ")
    return connection_state(cms_url, auth_token)


async def ask(runner: Runner, session_id: str, question: str) -> str:
    """Send one question and return the agent's last text reply."""
    message = types.Content(role="user", parts=[types.Part(text=question)])
    answer = ""
    async for event in runner.run_async(
        user_id=USER_ID,
        session_id=session_id,
        new_message=message,
    ):
        parts = event.content.parts if event.content else None
        for part in parts or []:
            if part.function_call:
                call = part.function_call
                print(f"  🔧 {describe_tool_call(call.name, call.args)}")
            elif part.text:
                answer = part.text
    return answer


async def run_console() -> None:
    state = read_connection()
    anonymous = not state["cms_auth_token"]

    session_service = InMemorySessionService()
    session = await session_service.create_session(
        app_name=APP_NAME,
        user_id=USER_ID,
        state=state,
    )
    runner = Runner(
        agent=create_agent(),
        app_name=APP_NAME,
        session_service=session_service,
    )

    print(f"\nConnected to {state['cms_url']} ({'anonymous' if anonymous else 'bearer token'})")
    if anonymous:
        print("Note: the Content Delivery tool needs a token; only content types "
              "and the manifest will work.")
    print("Ask about sites, pages and content types. Type 'quit' to exit.")

    while True:
        try:
            question = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if question.lower() in EXIT_WORDS:
            break
        if not question:
            continue

        answer = await ask(runner, session.id, question)
        print(f"\n{answer}" if answer else "\n(no answer; see the tool server log on stderr)")


if __name__ == "__main__":
    asyncio.run(run_console())
