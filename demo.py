import asyncio
import os
import sys

import httpx
from dotenv import load_dotenv

from services.event_stream import parse_event_stream

load_dotenv()


async def run_demo(topic: str):
    url = os.getenv("VIRAL_SHORTS_URL", "http://localhost:8000")

    print(f"🚀 Starting Viral Shorts Demo...")
    print(f"📝 Topic: {topic}")

    async with httpx.AsyncClient(timeout=None) as client:
        try:
            async with client.stream("POST", f"{url}/api/generate", json={"topic": topic}) as response:
                if response.status_code != 200:
                    body = await response.aread()
                    print(f"❌ Request rejected ({response.status_code}): {body.decode()[:300]}")
                    return

                async for line in response.aiter_lines():
                    for event in parse_event_stream([line]):
                        if "error" in event:
                            print(f"\n❌ Pipeline Error: {event['error']}")
                        elif "videoUrl" in event:
                            print(f"\n🎉 SUCCESS! Video is ready.")
                            print(f"📁 Location: {event['videoUrl'][:120]}")
                        else:
                            print(f"📊 {event['progress']}")
        except httpx.HTTPError as e:
            print(f"❌ Failed to reach server: {e}")


if __name__ == "__main__":
    topic = " ".join(sys.argv[1:]) or "Best productivity app"
    asyncio.run(run_demo(topic))
