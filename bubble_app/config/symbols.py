"""Tracked tickers and their display names."""

AI_COMPANIES = [
    'NVDA', 'MSFT', 'GOOGL', 'META', 'AMD', 'TSLA', 'AAPL', 'INTC', 'AMZN', 'CRM',
    'PLTR', 'SNOW', 'NET', 'CRWD', 'ZS', 'PANW', 'NOW', 'DOCN', 'AI', 'PATH',
]

DOTCOM_COMPANIES = [
    'CSCO', 'ORCL', 'INTC', 'MSFT', 'DELL', 'IBM', 'HPQ', 'SUNW', 'YHOO', 'AMZN',
]

# Superset of AI_COMPANIES; extra entries cover tickers a remote roster may add.
AI_COMPANY_NAMES = {
    'NVDA': 'NVIDIA Corporation',
    'MSFT': 'Microsoft Corporation',
    'GOOGL': 'Alphabet Inc.',
    'META': 'Meta Platforms Inc.',
    'AMD': 'Advanced Micro Devices',
    'TSLA': 'Tesla Inc.',
    'AAPL': 'Apple Inc.',
    'INTC': 'Intel Corporation',
    'AMZN': 'Amazon.com Inc.',
    'CRM': 'Salesforce Inc.',
    'PLTR': 'Palantir Technologies',
    'SNOW': 'Snowflake Inc.',
    'NET': 'Cloudflare Inc.',
    'CRWD': 'CrowdStrike Holdings',
    'ZS': 'Zscaler Inc.',
    'PANW': 'Palo Alto Networks',
    'NOW': 'ServiceNow Inc.',
    'DOCN': 'DigitalOcean Holdings',
    'AI': 'C3.ai Inc.',
    'PATH': 'UiPath Inc.',
    'ASML': 'ASML Holding',
    'AVGO': 'Broadcom Inc.',
    'QCOM': 'Qualcomm Inc.',
    'MU': 'Micron Technology',
    'LRCX': 'Lam Research',
    'KLAC': 'KLA Corporation',
    'ANET': 'Arista Networks',
    'MDB': 'MongoDB Inc.',
    'DDOG': 'Datadog Inc.',
    'ESTC': 'Elastic N.V.',
}


def display_name(symbol: str) -> str:
    """Display name for a ticker; unknown tickers display as themselves."""
    return AI_COMPANY_NAMES.get(symbol, symbol)
