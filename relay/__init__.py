"""Pacote do relay de logs HTTP -> IFTTT (Maker Webhooks).

Este pacote contém:
- constants: variáveis de ambiente e mapas de configuração
- errors: tipos de erro tratados na borda HTTP
- detection: normalização de severidade e emojis
- utils: parsing de timestamp e helpers de requisição
- formatters: formatação de data e do payload de saída
- services: integração com o IFTTT (envio destacado)
- controller: criação do Flask app e endpoints
"""
