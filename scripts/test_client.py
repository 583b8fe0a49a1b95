"""
Test Client for the Sahayak API.
Simple script to exercise the API endpoints against a running server.
"""

import asyncio
import httpx


BASE_URL = "http://localhost:3001"


async def test_health():
    """Test health endpoints."""
    print("\n🏥 Testing Health Endpoints...")

    async with httpx.AsyncClient() as client:
        response = await client.get(f"{BASE_URL}/health")
        print(f"   /health: {response.status_code}")
        print(f"   {response.json()}")

        response = await client.get(f"{BASE_URL}/health/ready")
        print(f"   /health/ready: {response.status_code}")
        print(f"   {response.json()}")


async def test_schemes():
    """Test scheme listing and search."""
    print("\n📋 Testing Scheme Endpoints...")

    async with httpx.AsyncClient() as client:
        response = await client.get(f"{BASE_URL}/api/schemes")
        data = response.json()
        print(f"   /api/schemes: {response.status_code} ({data.get('count')} schemes)")

        response = await client.get(f"{BASE_URL}/api/schemes", params={"query": "farmer"})
        data = response.json()
        print(f"   /api/schemes?query=farmer: {[s['name']['en'] for s in data.get('data', [])]}")

        response = await client.get(f"{BASE_URL}/api/schemes/does-not-exist")
        print(f"   /api/schemes/does-not-exist: {response.status_code}")


async def test_language_detection():
    """Test the language detector endpoint."""
    print("\n🔤 Testing Language Detection...")

    samples = [
        "Tell me about farmer schemes",
        "नमस्ते, मैं किसान हूं",
        "আমি একজন কৃষক",
        "நான் ஒரு விவசாயி",
    ]

    async with httpx.AsyncClient() as client:
        for text in samples:
            response = await client.post(f"{BASE_URL}/api/language/detect", json={"text": text})
            data = response.json()
            print(f"   {text!r} -> {data['language']} ({data['confidence']:.2f})")


async def test_chat():
    """Test a multi-turn chat."""
    print("\n💬 Testing Chat Endpoint...")

    turns = [
        {"message": "Tell me about farmer schemes", "language": "en"},
        {"message": "मैं महाराष्ट्र से हूं, मेरी उम्र 45 साल है", "language": "hi"},
    ]

    session_id = None
    history = []

    async with httpx.AsyncClient(timeout=30.0) as client:
        for turn in turns:
            payload = {**turn, "conversationHistory": history, "sessionId": session_id}
            print(f"\n   📤 [{turn['language']}] {turn['message']}")

            response = await client.post(f"{BASE_URL}/api/chat", json=payload)
            data = response.json()

            if response.status_code == 200:
                session_id = data["sessionId"]
                history += [
                    {"sender": "user", "text": turn["message"]},
                    {"sender": "assistant", "text": data["response"]},
                ]
                print(f"   🤖 Assistant: {data['response'][:150]}...")
                print(f"   📋 Schemes: {[s['id'] for s in data['schemes']]}")
                print(f"   🧾 Extracted: {data['extractedInfo']}")
            else:
                print(f"   ❌ {response.status_code} {data.get('errorCode')}: {data.get('error')}")


async def main():
    """Run all checks."""
    print("=" * 60)
    print("🧪 Sahayak API Test Client")
    print("=" * 60)
    print(f"Target: {BASE_URL}")

    try:
        await test_health()
        await test_schemes()
        await test_language_detection()
        await test_chat()

        print("\n" + "=" * 60)
        print("✅ All checks completed!")
        print("=" * 60)

    except httpx.ConnectError:
        print("\n❌ Cannot connect to server. Make sure it's running:")
        print("   uvicorn sahayak.main:app --reload --port 3001")


if __name__ == "__main__":
    asyncio.run(main())
