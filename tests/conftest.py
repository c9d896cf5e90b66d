# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import List

import pytest

from rag_pipeline.clients import PipelineClients

from fakes import FakeOpenAI, RecordingRPC, make_supabase


@pytest.fixture
def vector() -> List[float]:
    return [0.1, 0.2, 0.3]


@pytest.fixture
def rpc() -> RecordingRPC:
    return RecordingRPC(rows=[{"id": 1, "content": "A", "similarity": 0.9}])


@pytest.fixture
def fake_openai(vector) -> FakeOpenAI:
    return FakeOpenAI(vector=vector)


@pytest.fixture
def clients(fake_openai, rpc) -> PipelineClients:
    return PipelineClients(openai=fake_openai, supabase=make_supabase(rpc))
