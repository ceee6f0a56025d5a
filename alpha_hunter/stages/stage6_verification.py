"""
Stage 6: Verification
=====================
On-demand legitimacy check for a single project using a search-augmented LLM.
This stage is the only one that talks to the network, so it is async and
never runs as part of analysis; callers invoke it per project.

Output:
- One-sentence summary of the project's purpose and status
- Confidence score (0-100) that the project is real and active
- Up to three unique evidence links cited by the model
"""

import json
import os
import re
import time
from typing import Any, Dict, List, Optional, Tuple

from anthropic import AsyncAnthropic
from openai import AsyncOpenAI

from ..errors import VerificationError
from ..logging_config import get_logger
from ..models.schemas import (
    EvidenceLink,
    Project,
    VerificationResult,
    VerificationStatus,
)
from ..config.settings import LLM_CONFIG, LLM_DEFAULT_MODELS, VERIFICATION_CONFIG

logger = get_logger(__name__)

_FENCED_JSON = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")


class VerificationStage:
    """
    Stage 6: Verify project legitimacy with an LLM that can search the web.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        provider: Optional[str] = None,
        client: Optional[Any] = None,
    ):
        """
        Initialize LLM client.

        Args:
            api_key: API key for LLM provider
            provider: LLM provider ("openrouter", "openai", or "anthropic")
            client: Pre-built async client (skips client construction)
        """
        self.api_key = api_key or LLM_CONFIG.get("api_key") or os.getenv("OPENROUTER_API_KEY")
        self.provider = provider or LLM_CONFIG.get("provider", "openrouter")
        self.model = LLM_CONFIG.get("model") or LLM_DEFAULT_MODELS.get(
            self.provider, LLM_DEFAULT_MODELS["openrouter"]
        )
        self.base_url = LLM_CONFIG.get("base_url", "https://openrouter.ai/api/v1")
        self.site_url = LLM_CONFIG.get("site_url", "http://localhost:8000")
        self.app_name = LLM_CONFIG.get("app_name", "Alpha Hunter")
        self.timeout = LLM_CONFIG.get("timeout_seconds", 60.0)
        self.max_links = VERIFICATION_CONFIG["max_evidence_links"]
        self.client = client

        if self.client is None:
            self._initialize_client()

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    def _initialize_client(self):
        """Initialize the async LLM client based on provider"""
        if not self.api_key:
            return

        if self.provider == "openrouter":
            self.client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                default_headers={
                    "HTTP-Referer": self.site_url,
                    "X-Title": self.app_name,
                },
            )
        elif self.provider == "openai":
            self.client = AsyncOpenAI(api_key=self.api_key, timeout=self.timeout)
        elif self.provider == "anthropic":
            self.client = AsyncAnthropic(api_key=self.api_key, timeout=self.timeout)
        else:
            raise ValueError(f"Unknown provider: {self.provider}")

    async def verify(self, project: Project) -> VerificationResult:
        """
        Verify one project.

        Args:
            project: Project to check

        Returns:
            VerificationResult, status "verified" or "failed"

        Raises:
            VerificationError: if no LLM client is configured
        """
        if not self.client:
            raise VerificationError("AI service not initialized. An API key is required.")

        start_time = time.time()
        try:
            prompt = self._generate_prompt(project)
            text, citations = await self._call_llm(prompt)
            result = self._parse_response(text, citations)
        except Exception as e:
            logger.error("Error verifying project %r: %s", project.project_name, e)
            return VerificationResult(
                verification_status=VerificationStatus.FAILED,
                verification_summary=VERIFICATION_CONFIG["failure_summary"],
            )

        logger.info(
            "Verified %r (confidence %s, %d links) in %.0fms",
            project.project_name,
            result.verification_score,
            len(result.evidence_links),
            (time.time() - start_time) * 1000,
        )
        return result

    def _generate_prompt(self, project: Project) -> str:
        """Generate the verification prompt"""
        return f"""Act as a meticulous Web3 project analyst. Your task is to verify the existence and legitimacy
of a project based on the data provided. Use the available search tool to find information online.
Your response MUST be a JSON object. Do not include any other text or markdown formatting.

Project Data:
- Name: "{project.project_name}"
- Website: "{project.website_url}"
- Categories: "{project.category_tags}"
- Description: "{project.raw_description}"

Based on your web search, provide a JSON object with the following keys:
- "summary": A brief, one-sentence summary of the project's main purpose and current status.
- "confidenceScore": An integer score from 0 to 100 representing your confidence that this is a real, active project. 0 means it's likely fake or defunct, 100 means it's highly legitimate and active."""

    async def _call_llm(self, prompt: str) -> Tuple[str, List[Dict[str, str]]]:
        """Call the LLM API, returning response text and cited sources"""
        if self.provider in ["openrouter", "openai"]:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": "You are a Web3 due-diligence analyst. Always respond with valid JSON only."},
                    {"role": "user", "content": prompt},
                ],
                temperature=LLM_CONFIG.get("temperature", 0.2),
                max_tokens=LLM_CONFIG.get("max_tokens", 600),
            )
            message = response.choices[0].message
            citations = []
            for annotation in getattr(message, "annotations", None) or []:
                if _field(annotation, "type") != "url_citation":
                    continue
                cited = _field(annotation, "url_citation")
                citations.append({"title": _field(cited, "title") or "", "uri": _field(cited, "url")})
            return message.content or "", citations

        elif self.provider == "anthropic":
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=LLM_CONFIG.get("max_tokens", 600),
                tools=[{"type": "web_search_20250305", "name": "web_search", "max_uses": 3}],
                messages=[{"role": "user", "content": prompt}],
            )
            texts = []
            citations = []
            for block in response.content:
                if _field(block, "type") != "text":
                    continue
                texts.append(_field(block, "text") or "")
                for cited in _field(block, "citations") or []:
                    citations.append({"title": _field(cited, "title") or "", "uri": _field(cited, "url")})
            return "".join(texts), citations

        raise ValueError(f"Unknown provider: {self.provider}")

    def _parse_response(
        self, response: str, citations: List[Dict[str, str]]
    ) -> VerificationResult:
        """Parse LLM response into structured result"""
        data = json.loads(extract_json_text(response))
        if not isinstance(data, dict):
            raise ValueError("Verification response is not a JSON object")

        score = data.get("confidenceScore")
        if score is not None:
            score = max(0, min(100, int(round(float(score)))))

        return VerificationResult(
            verification_status=VerificationStatus.VERIFIED,
            verification_summary=data.get("summary"),
            verification_score=score,
            evidence_links=unique_links(citations)[: self.max_links],
        )


# =============================================================================
# Helper functions
# =============================================================================

def _field(obj: Any, name: str) -> Any:
    """Read a field from an SDK object or a plain dict"""
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def extract_json_text(response: str) -> str:
    """Strip a markdown code fence if the model added one"""
    match = _FENCED_JSON.search(response or "")
    if match and match.group(1):
        return match.group(1)
    return (response or "").strip()


def unique_links(citations: List[Dict[str, str]]) -> List[EvidenceLink]:
    """Deduplicate citations by URI, keeping first-seen order"""
    seen = set()
    links = []
    for cited in citations:
        uri = cited.get("uri")
        if not uri or uri in seen:
            continue
        seen.add(uri)
        links.append(EvidenceLink(title=cited.get("title") or "", uri=uri))
    return links
