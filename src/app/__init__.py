"""App, o coração do gateway: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: relay da notificação (verificar, resolver, encaminhar)
- services/: resolução de alvos e dispatcher de encaminhamento
- domain/: envelope, notificação verificada e resultados de encaminhamento
- infra/: implementações concretas de IO (crypto, HTTP)
- protocols/: contratos/interfaces
- observability/: logs estruturados e métricas

Padrão: app executa; api adapta; config configura; utils apoia.
"""
