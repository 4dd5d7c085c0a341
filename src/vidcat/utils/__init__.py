"""Utility helpers shared across vidcat modules."""

from vidcat.utils.identity import InvalidVideoIdError, VideoLocation, decode_video_id, encode_video_id

__all__ = ["InvalidVideoIdError", "VideoLocation", "decode_video_id", "encode_video_id"]
