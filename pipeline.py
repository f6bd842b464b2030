"""Main pipeline orchestration using LangGraph."""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional, TypedDict

from langgraph.graph import StateGraph, END
from pydantic import BaseModel

from api.models import ITwitterClient, TweetReference
from api.twitter_client import parse_json
from config import Credentials, ENV_FILE, load_credentials
from downloader.models import DownloadResult, IVideoDownloader
from errors import MediaFetchError
from selector.models import IVariantSelector

logger = logging.getLogger(__name__)


class PipelineState(TypedDict):
    """State for the LangGraph pipeline."""
    tweet_url: str
    env_path: str
    reference: Optional[TweetReference]
    credentials: Optional[Credentials]
    access_token: Optional[str]
    tweet: Optional[Dict[str, Any]]
    video_url: Optional[str]
    download: Optional[DownloadResult]
    error: Optional[MediaFetchError]


class PipelineResult(BaseModel):
    """Outcome of one run."""

    reference: Optional[TweetReference] = None
    video_url: Optional[str] = None
    download: Optional[DownloadResult] = None
    error: Optional[MediaFetchError] = None

    class Config:
        arbitrary_types_allowed = True

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def no_video(self) -> bool:
        return self.error is None and self.download is None


class MediaDownloadPipeline:
    """Tweet URL in, video file out."""

    def __init__(
        self,
        client: ITwitterClient,
        selector: IVariantSelector,
        downloader: IVideoDownloader,
    ):
        self.client = client
        self.selector = selector
        self.downloader = downloader

        self._progress_callback = None

        self.graph = self._build_graph()

    def set_progress_callback(self, callback: Optional[Callable[[str], None]]):
        """Set the progress callback for stage updates."""
        self._progress_callback = callback

    def _progress(self, message: str):
        if self._progress_callback:
            self._progress_callback(message)

    def _build_graph(self) -> StateGraph:
        """Build the LangGraph pipeline."""

        workflow = StateGraph(PipelineState)

        stages = [
            ("parse_input", self._parse_input_node),
            ("load_credentials", self._load_credentials_node),
            ("exchange_token", self._exchange_token_node),
            ("fetch_tweet", self._fetch_tweet_node),
            ("select_variant", self._select_variant_node),
        ]
        for name, node in stages:
            workflow.add_node(name, node)
        workflow.add_node("download", self._download_node)

        # Every stage either moves forward or stops on error
        for (name, _), (next_name, _) in zip(stages, stages[1:]):
            workflow.add_conditional_edges(
                name, self._route_on_error, {"continue": next_name, "fail": END}
            )
        workflow.add_conditional_edges(
            "select_variant",
            self._route_on_video,
            {"download": "download", "done": END, "fail": END},
        )
        workflow.add_edge("download", END)

        workflow.set_entry_point("parse_input")

        return workflow.compile()

    @staticmethod
    def _route_on_error(state: PipelineState) -> str:
        return "fail" if state.get("error") else "continue"

    @staticmethod
    def _route_on_video(state: PipelineState) -> str:
        if state.get("error"):
            return "fail"
        # "" means the variants list had nothing usable
        return "download" if state.get("video_url") else "done"

    async def _parse_input_node(self, state: PipelineState) -> PipelineState:
        try:
            state["reference"] = TweetReference.from_url(state["tweet_url"])
            logger.info(
                f"Parsed tweet {state['reference'].tweet_id} by {state['reference'].author}"
            )
        except MediaFetchError as e:
            logger.error(f"Input parsing failed: {e}")
            state["error"] = e
        return state

    async def _load_credentials_node(self, state: PipelineState) -> PipelineState:
        try:
            self._progress("📄 Loading credentials...")
            state["credentials"] = load_credentials(state["env_path"])
        except MediaFetchError as e:
            logger.error(f"Loading credentials failed: {e}")
            state["error"] = e
        return state

    async def _exchange_token_node(self, state: PipelineState) -> PipelineState:
        try:
            self._progress("🔑 Requesting access token...")
            state["access_token"] = await self.client.fetch_access_token(state["credentials"])
        except MediaFetchError as e:
            logger.error(f"Token exchange failed: {e}")
            state["error"] = e
        return state

    async def _fetch_tweet_node(self, state: PipelineState) -> PipelineState:
        try:
            self._progress("🌐 Fetching tweet...")
            body = await self.client.fetch_tweet(
                state["access_token"], state["reference"].tweet_id
            )
            state["tweet"] = parse_json(body, "tweet response")
        except MediaFetchError as e:
            logger.error(f"Tweet lookup failed: {e}")
            state["error"] = e
        return state

    async def _select_variant_node(self, state: PipelineState) -> PipelineState:
        try:
            self._progress("🎯 Selecting video variant...")
            state["video_url"] = self.selector.select_video_url(state["tweet"])
        except MediaFetchError as e:
            logger.error(f"Variant selection failed: {e}")
            state["error"] = e
        return state

    async def _download_node(self, state: PipelineState) -> PipelineState:
        try:
            self._progress("⬇️ Downloading video...")
            state["download"] = await self.downloader.download(
                state["video_url"], state["reference"].download_path
            )
        except MediaFetchError as e:
            logger.error(f"Download failed: {e}")
            state["error"] = e
        return state

    async def run(
        self,
        tweet_url: str,
        env_path: Path = Path(ENV_FILE),
        progress_callback: Optional[Callable[[str], None]] = None,
    ) -> PipelineResult:
        """Run the complete pipeline for one tweet URL."""

        logger.info(f"Starting pipeline for: {tweet_url}")

        self.set_progress_callback(progress_callback)

        initial_state: PipelineState = {
            "tweet_url": tweet_url,
            "env_path": str(env_path),
            "reference": None,
            "credentials": None,
            "access_token": None,
            "tweet": None,
            "video_url": None,
            "download": None,
            "error": None,
        }

        final_state = await self.graph.ainvoke(initial_state)

        return PipelineResult(
            reference=final_state.get("reference"),
            video_url=final_state.get("video_url"),
            download=final_state.get("download"),
            error=final_state.get("error"),
        )
