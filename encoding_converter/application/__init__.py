"""Application services: codecs, transcode engine, session and export."""
