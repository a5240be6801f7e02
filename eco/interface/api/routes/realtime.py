"""Realtime community updates over WebSocket."""

import asyncio

import logfire
from dishka import AsyncContainer
from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from eco.adapter.realtime import BroadcastHub
from eco.domain.event import CommunityStatsUpdated

router = APIRouter(tags=["realtime"])


@router.websocket("/ws/community")
async def community_updates(websocket: WebSocket) -> None:
    """Stream ``community-stats-updated`` frames as ``{event, data}`` JSON.

    Messages sent by the client are ignored; the connection stays open until
    the client disconnects.
    """
    container: AsyncContainer = websocket.app.state.dishka_container
    hub = await container.get(BroadcastHub)

    # Subscribe before accepting so no broadcast is missed after the handshake
    async with hub.subscribe(CommunityStatsUpdated.topic) as subscription:
        await websocket.accept()
        logfire.info("Community subscriber connected")

        receiver = asyncio.create_task(_wait_for_disconnect(websocket))
        try:
            while True:
                getter = asyncio.create_task(subscription.get())
                done, _ = await asyncio.wait(
                    {getter, receiver}, return_when=asyncio.FIRST_COMPLETED
                )
                if receiver in done:
                    getter.cancel()
                    break
                await websocket.send_json(getter.result().to_dict())
        except WebSocketDisconnect:
            pass
        finally:
            receiver.cancel()
            logfire.info(
                "Community subscriber disconnected", dropped=subscription.dropped
            )


async def _wait_for_disconnect(websocket: WebSocket) -> None:
    while True:
        message = await websocket.receive()
        if message["type"] == "websocket.disconnect":
            return
