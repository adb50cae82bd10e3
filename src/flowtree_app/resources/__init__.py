"""
Static resources for FlowTree app (stylesheet, bundled sample tree).
"""
