import os

# Use LiteLLM's bundled model cost map instead of fetching it over the network
# in a background thread at import time (that thread races pytest's imports).
os.environ.setdefault("LITELLM_LOCAL_MODEL_COST_MAP", "True")
