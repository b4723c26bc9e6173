from .classes import solve_method, region, class_dic
