"""ctranscode - probe a media file and transcode only what the device cannot play."""

__version__ = "0.1.0"
