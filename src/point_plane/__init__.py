from pathlib import Path

SHADER_PATH = Path(__file__).parent / "slang_shaders"
