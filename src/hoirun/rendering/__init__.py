from hoirun.rendering.manifest import ManifestSynthesizer

__all__ = ["ManifestSynthesizer"]
