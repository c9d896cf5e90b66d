"""
rag_pipeline: Retrieval-Augmented Generation pipeline.

Components:
  config: environment-sourced PipelineSettings
  clients: OpenAI + Supabase client handles, built once per process
  embedder: text → vector (OpenAI embeddings)
  retriever: similarity search via the Supabase match_movies RPC
  transcript: per-request system/user/assistant conversation
  llm_engine: OpenAI chat completion over the retrieved context
  pipeline: QueryPipeline (embed → retrieve → generate)
"""

from rag_pipeline.pipeline import QueryPipeline

__all__ = ["QueryPipeline"]
