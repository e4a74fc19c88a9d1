from acpsearch.testing.fixtures import (  # noqa: F401
    agent_payload,
    mock_client,
    mock_client_with_agents,
    sample_agent,
    sample_agents,
)
