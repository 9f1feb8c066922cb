"""Shared fixtures: realistic report documents."""

import pytest

from campaign_insights.extraction import ReportExtractor

FULL_REPORT = """📊 RELATÓRIO DE DESEMPENHO
Campanha: Stories 12/12 - Teste do Vídeo
Data de criação: 12/12/2024

💰 INVESTIMENTO
• Gasto Total: R$ 1.234,56
• Alcance (pessoas únicas): 74 pessoas
• Impressões: 104
• Frequência média: 1,41
• CPM (custo por mil impressões): R$ 68,11

🖱️ CLIQUES
• Cliques Totais: 1
• Cliques Únicos: 1
• CTR (taxa de cliques): 0,96%
• CPC (custo por clique): R$ 5,04

📈 RESULTADOS
• Visualizações do vídeo: 10 (R$ 0,50 cada)
• Cliques no link: 1 (R$ 5,04 cada)
• Reações no post: 1
• Compartilhamentos: 0
• Curtidas líquidas: 1
• Conversas iniciadas (mensagem): 0 (R$ 0,00 cada)
• Engajamentos totais: 12 (R$ 0,42 cada)

⚙️ CONFIGURAÇÕES
• Status atual: ACTIVE
• Tipo de CTA: WHATSAPP_MESSAGE
• Faixa etária: 18 a 65 anos
• Interesses: Senior management, Empresarios
• Cargos de trabalho: Empresário, Sócio Proprietário, Proprietário(a), Sócio-Diretor Comercial

📝 CONTEÚDO DO ANÚNCIO
Você tem uma empresa ou um emprego que te dá dor de cabeça? 🤯
Faça o teste do vídeo: se você sumir por 15 dias, o dinheiro continua entrando?
🔗 Link do vídeo: https://cdn.example.com/videos/teste-do-video.mp4

📽️ DESEMPENHO DO VÍDEO
• Total de visualizações: 74
• Até 25%: 8 pessoas = (10,81%)
• Até 50%: 2 pessoas = (2,70%)
• Até 75%: 1 pessoa = (1,35%)
• Até o final do vídeo: 0 pessoas = (0,00%)
"""

IMAGE_REPORT = """Campanha: Carrossel Verão
Data de criação: 05/01/2025

💰 INVESTIMENTO
Gasto Total: R$ 80,00
Alcance: 3.200 pessoas
Impressões: 5.900
Frequência: 1,84
CPM: R$ 13,56

🖱️ CLIQUES
Cliques Totais: 41
Cliques Únicos: 38
CTR: 0,69%
CPC: R$ 1,95

📈 RESULTADOS
Cliques no Link: 41 (R$ 1,95 cada)
Reações no Post: 17
Compartilhamentos: 3
Curtidas Líquidas: 15
Engajamentos Totais: 61 (R$ 1,31 cada)

⚙️ CONFIGURAÇÕES
Status atual: PAUSED
Público: 25 a 45 anos
"""


@pytest.fixture(scope="session")
def extractor() -> ReportExtractor:
    """Extractor using the bundled field registry."""
    return ReportExtractor()


@pytest.fixture
def full_report() -> str:
    return FULL_REPORT


@pytest.fixture
def image_report() -> str:
    return IMAGE_REPORT
